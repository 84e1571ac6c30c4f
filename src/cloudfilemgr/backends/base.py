"""Storage capability interface and the in-memory simulated backend."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from cloudfilemgr.errors import NotFoundError, ProviderNotConnectedError
from cloudfilemgr.models import FileItem, ProviderType
from cloudfilemgr.util.ids import new_item_id
from cloudfilemgr.util.mime import OCTET_STREAM
from cloudfilemgr.util.time import now_utc

from .file_table import FileTable
from .operations import LatencyProfile, Operation

logger = logging.getLogger(__name__)


class StorageBackend(ABC):
    """
    Capability interface every provider backend satisfies.

    All operations are coroutines. Every operation except `authenticate` and
    `disconnect` raises ProviderNotConnectedError while not authenticated.
    """

    provider: ClassVar[ProviderType]
    root_id: ClassVar[str]

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        ...

    @abstractmethod
    async def authenticate(self) -> bool:
        """Run the provider handshake. Returns True on success."""
        ...

    @abstractmethod
    async def list_files(self, folder_id: Optional[str] = None) -> list[FileItem]:
        """List direct children of folder_id (root when None), in table order."""
        ...

    @abstractmethod
    async def download_file(self, file: FileItem) -> bytes:
        ...

    @abstractmethod
    async def upload_file(
        self,
        data: bytes,
        name: str,
        folder_id: Optional[str] = None,
    ) -> FileItem:
        ...

    @abstractmethod
    async def create_folder(self, name: str, folder_id: Optional[str] = None) -> FileItem:
        ...

    @abstractmethod
    async def delete_file(self, file: FileItem) -> None:
        """Delete by id. A stale id is a no-op, not an error."""
        ...

    @abstractmethod
    async def rename_file(self, file: FileItem, new_name: str) -> FileItem:
        ...

    @abstractmethod
    async def move_file(self, file: FileItem, destination_folder_id: str) -> FileItem:
        ...

    @abstractmethod
    async def copy_file(self, file: FileItem, destination_folder_id: str) -> FileItem:
        ...

    @abstractmethod
    async def get_file_metadata(self, file_id: str) -> FileItem:
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Forget the authenticated session. Stored files are kept."""
        ...

    async def search_files(self, query: str) -> list[FileItem]:
        """
        Search files by name.

        Default: list the root folder and keep case-insensitive substring
        matches. This is not a recursive search; override where the provider
        supports one.
        """
        files = await self.list_files(None)
        needle = query.casefold()
        return [f for f in files if needle in f.name.casefold()]


class InMemoryBackend(StorageBackend):
    """
    Simulated remote storage held in a FileTable.

    Subclasses provide the id namespace, the seeded hierarchy and the download
    payload prefix. Each operation suspends for its latency class before
    touching the table; the table lock is held only for the table access.
    """

    id_prefix: ClassVar[str]
    folder_mime_type: ClassVar[str]
    download_prefix: ClassVar[str]

    def __init__(self, latency: Optional[LatencyProfile] = None) -> None:
        self._latency = latency if latency is not None else LatencyProfile()
        self._authenticated = False
        self._table = FileTable(self._seed_items())

    @abstractmethod
    def _seed_items(self) -> list[FileItem]:
        """Return the mock hierarchy, root first."""
        ...

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def latency(self) -> LatencyProfile:
        return self._latency

    # ----------------------------
    # Capability interface
    # ----------------------------
    async def authenticate(self) -> bool:
        await self._simulate(Operation.AUTHENTICATE)
        self._authenticated = True
        logger.info(f"{self.provider.label}: authenticated")
        return True

    async def list_files(self, folder_id: Optional[str] = None) -> list[FileItem]:
        self._ensure_connected()
        await self._simulate(Operation.LIST_FILES)

        target_id = folder_id or self.root_id
        async with self._table.lock.read():
            return self._table.children_of(target_id)

    async def download_file(self, file: FileItem) -> bytes:
        self._ensure_connected()
        await self._simulate(Operation.DOWNLOAD_FILE)
        return f"{self.download_prefix}{file.name}".encode("utf-8")

    async def upload_file(
        self,
        data: bytes,
        name: str,
        folder_id: Optional[str] = None,
    ) -> FileItem:
        self._ensure_connected()
        await self._simulate(Operation.UPLOAD_FILE)

        new_file = FileItem(
            id=new_item_id(self.id_prefix),
            name=name,
            is_folder=False,
            provider=self.provider,
            parent_id=folder_id or self.root_id,
            path=f"/{name}",
            size=len(data),
            modified_date=now_utc(),
            mime_type=OCTET_STREAM,
        )
        async with self._table.lock.write():
            self._table.append(new_file)
        return new_file

    async def create_folder(self, name: str, folder_id: Optional[str] = None) -> FileItem:
        self._ensure_connected()
        await self._simulate(Operation.CREATE_FOLDER)

        new_folder = FileItem(
            id=new_item_id(self.id_prefix),
            name=name,
            is_folder=True,
            provider=self.provider,
            parent_id=folder_id or self.root_id,
            path=f"/{name}",
            modified_date=now_utc(),
            mime_type=self.folder_mime_type,
        )
        async with self._table.lock.write():
            self._table.append(new_folder)
        return new_folder

    async def delete_file(self, file: FileItem) -> None:
        self._ensure_connected()
        await self._simulate(Operation.DELETE_FILE)

        async with self._table.lock.write():
            removed = self._table.remove(file.id)
        if not removed:
            logger.debug(f"{self.provider.label}: delete of unknown id {file.id} ignored")

    async def rename_file(self, file: FileItem, new_name: str) -> FileItem:
        self._ensure_connected()
        await self._simulate(Operation.RENAME_FILE)

        async with self._table.lock.write():
            current = self._require(file.id)
            updated = dataclasses.replace(current, name=new_name, modified_date=now_utc())
            self._table.replace(updated)
        return updated

    async def move_file(self, file: FileItem, destination_folder_id: str) -> FileItem:
        """
        Re-parent a file.

        Notes:
            - The destination is not type-checked here; that is a caller
              precondition.
            - path is kept as-is and goes stale after the move.
        """
        self._ensure_connected()
        await self._simulate(Operation.MOVE_FILE)

        async with self._table.lock.write():
            current = self._require(file.id)
            updated = dataclasses.replace(
                current,
                parent_id=destination_folder_id,
                modified_date=now_utc(),
            )
            self._table.replace(updated)
        return updated

    async def copy_file(self, file: FileItem, destination_folder_id: str) -> FileItem:
        """Copy from the caller's snapshot; the source need not be in the table."""
        self._ensure_connected()
        await self._simulate(Operation.COPY_FILE)

        copied = dataclasses.replace(
            file,
            id=new_item_id(self.id_prefix),
            provider=self.provider,
            parent_id=destination_folder_id,
            modified_date=now_utc(),
        )
        async with self._table.lock.write():
            self._table.append(copied)
        return copied

    async def get_file_metadata(self, file_id: str) -> FileItem:
        self._ensure_connected()
        await self._simulate(Operation.GET_FILE_METADATA)

        async with self._table.lock.read():
            return self._require(file_id)

    def disconnect(self) -> None:
        self._authenticated = False
        logger.info(f"{self.provider.label}: disconnected")

    # ----------------------------
    # Internals
    # ----------------------------
    def _ensure_connected(self) -> None:
        if not self._authenticated:
            raise ProviderNotConnectedError(
                "Cloud provider not connected",
                details={"provider": self.provider.value},
            )

    def _require(self, file_id: str) -> FileItem:
        item = self._table.get(file_id)
        if item is None:
            raise NotFoundError(
                "File not found",
                details={"provider": self.provider.value, "file_id": file_id},
            )
        return item

    async def _simulate(self, operation: Operation) -> None:
        delay = self._latency.delay_for(operation)
        logger.debug(f"{self.provider.label}: {operation.value} ({delay:.3f}s)")
        await asyncio.sleep(delay)
