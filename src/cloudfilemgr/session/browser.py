"""FileBrowsingSession: per-provider orchestration of backend calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar, Union

from cloudfilemgr.backends import StorageBackend
from cloudfilemgr.errors import CloudFileMgrError, wrap_unexpected
from cloudfilemgr.models import ConnectedProvider, FileItem, ProviderType, SessionState
from cloudfilemgr.registry import ProviderRegistry, default_registry
from cloudfilemgr.settings import DEFAULT_SEARCH_DEBOUNCE_SEC, Settings

from .validators import validate_destination_is_folder

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[[SessionState], None]


class FileBrowsingSession:
    """
    Folder listing, loading and error state for one provider.

    Every operation goes Idle -> Loading -> Success | Failure. Failures are
    stored in `error` (untyped exceptions wrapped as NetworkError) and never
    raised; `files` keeps its previous value on failure.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        search_debounce_sec: float = DEFAULT_SEARCH_DEBOUNCE_SEC,
    ) -> None:
        if search_debounce_sec < 0:
            raise ValueError("search_debounce_sec must be >= 0")

        self._backend = backend
        self._debounce_sec = search_debounce_sec
        self._listeners: list[Listener] = []

        self.files: list[FileItem] = []
        self.current_folder: Optional[FileItem] = None
        self.is_loading = False
        self.error: Optional[CloudFileMgrError] = None
        self.search_query = ""

        self._search_token = 0
        self._last_effective_query = ""
        self._pending_search: Optional[asyncio.Task[None]] = None

    @classmethod
    def for_provider(
        cls,
        provider: Union[ConnectedProvider, ProviderType],
        registry: Optional[ProviderRegistry] = None,
        *,
        settings: Optional[Settings] = None,
    ) -> FileBrowsingSession:
        """
        Create a session for a connected provider.

        Raises:
            ProviderNotRegisteredError: if the registry has no backend for it.
        """
        provider_type = provider.type if isinstance(provider, ConnectedProvider) else provider
        registry = registry if registry is not None else default_registry()
        backend = registry.require(provider_type)
        debounce = settings.search_debounce_sec if settings else DEFAULT_SEARCH_DEBOUNCE_SEC
        return cls(backend, search_debounce_sec=debounce)

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def provider(self) -> ProviderType:
        return self._backend.provider

    @property
    def state(self) -> SessionState:
        return SessionState(
            files=tuple(self.files),
            current_folder=self.current_folder,
            is_loading=self.is_loading,
            error=self.error,
            search_query=self.search_query,
        )

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Call listener with every new state. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    # ----------------------------
    # Listing / navigation
    # ----------------------------
    async def load_files(self, folder_id: Optional[str] = None) -> None:
        def _apply(files: list[FileItem]) -> None:
            self.files = list(files)

        await self._execute("list_files", lambda: self._backend.list_files(folder_id), _apply)

    async def search_files(self, query: str) -> None:
        await self._search(query, token=None)

    async def navigate_to_folder(self, folder: FileItem) -> None:
        if not folder.is_folder:
            return
        await self._cancel_search()
        self.current_folder = folder
        await self.load_files(folder.id)

    async def navigate_back(self) -> None:
        """Return to the provider root (single level, no breadcrumb stack)."""
        await self._cancel_search()
        self.current_folder = None
        await self.load_files(None)

    async def refresh(self) -> None:
        await self._cancel_search()
        await self.load_files(self._current_folder_id())

    # ----------------------------
    # Mutations
    # ----------------------------
    async def delete_file(self, file: FileItem) -> None:
        def _apply(_: None) -> None:
            self.files = [f for f in self.files if f.id != file.id]

        await self._execute("delete_file", lambda: self._backend.delete_file(file), _apply)

    async def rename_file(self, file: FileItem, new_name: str) -> None:
        def _apply(updated: FileItem) -> None:
            self.files = [updated if f.id == file.id else f for f in self.files]

        await self._execute(
            "rename_file",
            lambda: self._backend.rename_file(file, new_name),
            _apply,
        )

    async def create_folder(self, name: str) -> None:
        folder_id = self._current_folder_id()
        await self._execute(
            "create_folder",
            lambda: self._backend.create_folder(name, folder_id),
            self._append,
        )

    async def upload_file(self, data: bytes, name: str) -> None:
        folder_id = self._current_folder_id()
        await self._execute(
            "upload_file",
            lambda: self._backend.upload_file(data, name, folder_id),
            self._append,
        )

    async def move_file(self, file: FileItem, destination: FileItem) -> None:
        if not self._check(lambda: validate_destination_is_folder(destination, "MOVE")):
            return

        def _apply(_: FileItem) -> None:
            # Removed even when destination is the open folder; a reload shows it.
            self.files = [f for f in self.files if f.id != file.id]

        await self._execute(
            "move_file",
            lambda: self._backend.move_file(file, destination.id),
            _apply,
        )

    async def copy_file(self, file: FileItem, destination: FileItem) -> None:
        if not self._check(lambda: validate_destination_is_folder(destination, "COPY")):
            return

        def _apply(copied: FileItem) -> None:
            if self.current_folder is not None and self.current_folder.id == destination.id:
                self.files = self.files + [copied]

        await self._execute(
            "copy_file",
            lambda: self._backend.copy_file(file, destination.id),
            _apply,
        )

    async def download_file(self, file: FileItem) -> Optional[bytes]:
        """Return the payload, or None on failure (see `error`)."""
        result: list[bytes] = []
        await self._execute(
            "download_file",
            lambda: self._backend.download_file(file),
            result.append,
        )
        return result[0] if result else None

    # ----------------------------
    # Debounced search
    # ----------------------------
    def set_search_query(self, query: str) -> None:
        """
        Record a search edit and schedule a debounced dispatch.

        A pending dispatch is cancelled. After the quiet interval the newest
        query runs if it differs from the last dispatched one: non-empty ->
        search; empty with an open folder -> list that folder.
        Must be called from a running event loop.
        """
        self.search_query = query
        self._search_token += 1
        token = self._search_token

        if self._pending_search is not None and not self._pending_search.done():
            self._pending_search.cancel()

        self._pending_search = asyncio.get_running_loop().create_task(
            self._debounced_search(query, token)
        )
        self._publish()

    async def wait_for_search(self) -> None:
        """Wait until no debounced dispatch is pending."""
        while self._pending_search is not None and not self._pending_search.done():
            await asyncio.wait([self._pending_search])

    async def close(self) -> None:
        """Cancel any pending debounced dispatch."""
        await self._cancel_search()

    async def _cancel_search(self) -> None:
        # Any dispatch started before this point must not publish its result.
        self._search_token += 1
        task = self._pending_search
        self._pending_search = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])

    async def _debounced_search(self, query: str, token: int) -> None:
        await asyncio.sleep(self._debounce_sec)
        if token != self._search_token or query == self._last_effective_query:
            return

        if query:
            await self._search(query, token=token)
        elif self.current_folder is not None:
            await self.load_files(self.current_folder.id)

        self._last_effective_query = query

    async def _search(self, query: str, *, token: Optional[int]) -> None:
        def _apply(files: list[FileItem]) -> None:
            self.files = list(files)

        await self._execute(
            "search_files",
            lambda: self._backend.search_files(query),
            _apply,
            token=token,
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _current_folder_id(self) -> Optional[str]:
        return self.current_folder.id if self.current_folder is not None else None

    def _append(self, item: FileItem) -> None:
        self.files = self.files + [item]

    def _check(self, validate: Callable[[], None]) -> bool:
        """Run a local precondition; on failure store the error without loading."""
        try:
            validate()
        except CloudFileMgrError as exc:
            self.error = exc
            self._publish()
            return False
        return True

    async def _execute(
        self,
        operation: str,
        func: Callable[[], Awaitable[T]],
        on_success: Callable[[T], None],
        *,
        token: Optional[int] = None,
    ) -> bool:
        self.is_loading = True
        self.error = None
        self._publish()

        try:
            result = await func()
        except asyncio.CancelledError:
            self.is_loading = False
            self._publish()
            raise
        except Exception as exc:
            error = wrap_unexpected(exc, details={"operation": operation})
            logger.warning(f"{self.provider.value}: {operation} failed: {error}")
            if token is None or token == self._search_token:
                self.error = error
            self.is_loading = False
            self._publish()
            return False

        if token is not None and token != self._search_token:
            logger.debug(f"{self.provider.value}: discarding superseded {operation} result")
        else:
            on_success(result)
        self.is_loading = False
        self._publish()
        return True

    def _publish(self) -> None:
        if not self._listeners:
            return
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Session state listener failed")
