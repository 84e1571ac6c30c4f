"""AuthSessionStore: persisted list of connected providers."""

from __future__ import annotations

import json
import logging
import threading
from typing import Iterable, Optional

from cloudfilemgr.errors import CloudFileMgrError
from cloudfilemgr.models import ConnectedProvider
from cloudfilemgr.settings import DEFAULT_STORAGE_KEY, Settings

from .storage import JsonFileStorage, KeyringStorage, KeyValueStorage, MemoryStorage

logger = logging.getLogger(__name__)


class AuthSessionStore:
    """
    Load/save the connected-provider list under one well-known key.

    Notes:
        - Absent or corrupt data loads as an empty list, never an error.
        - add_connection/remove_connection are read-modify-write and are
          serialized on an in-process lock.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        *,
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage if storage is not None else MemoryStorage()
        self._key = key
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Settings) -> AuthSessionStore:
        """Use a JSON file when settings.store_path is set, the OS keyring otherwise."""
        storage: KeyValueStorage
        if settings.store_path:
            storage = JsonFileStorage(settings.store_path)
        else:
            storage = KeyringStorage(settings.keyring_service)
        return cls(storage, key=settings.storage_key)

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[ConnectedProvider]:
        try:
            raw = self._storage.get(self._key)
        except CloudFileMgrError as exc:
            logger.warning(f"Could not read connected providers: {exc}")
            return []
        if raw is None:
            return []
        return _decode(raw)

    def save(self, providers: Iterable[ConnectedProvider]) -> None:
        with self._lock:
            self._storage.set(self._key, _encode(providers))

    def add_connection(self, provider: ConnectedProvider) -> bool:
        """Persist provider. Returns False if a record with the same id exists."""
        with self._lock:
            providers = self.load()
            if any(p.id == provider.id for p in providers):
                return False
            providers.append(provider)
            self.save(providers)
        logger.info(f"Saved connection {provider.id} ({provider.type.value})")
        return True

    def remove_connection(self, provider: ConnectedProvider) -> bool:
        """Forget provider by id. Returns False if no record matched."""
        with self._lock:
            providers = self.load()
            remaining = [p for p in providers if p.id != provider.id]
            if len(remaining) == len(providers):
                return False
            self.save(remaining)
        logger.info(f"Removed connection {provider.id} ({provider.type.value})")
        return True

    def clear(self) -> None:
        with self._lock:
            self._storage.delete(self._key)


def _encode(providers: Iterable[ConnectedProvider]) -> str:
    return json.dumps([p.to_dict() for p in providers], separators=(",", ":"))


def _decode(raw: str) -> list[ConnectedProvider]:
    try:
        data = json.loads(raw)
    except ValueError as exc:
        logger.warning(f"Ignoring corrupt connected-provider data: {exc}")
        return []

    if not isinstance(data, list):
        logger.warning("Ignoring connected-provider data: not a list")
        return []

    try:
        return [ConnectedProvider.from_dict(item) for item in data]
    except (ValueError, TypeError) as exc:
        logger.warning(f"Ignoring malformed connected-provider record: {exc}")
        return []
