"""Key-value storages backing the connected-provider record."""

from __future__ import annotations

import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from cloudfilemgr.errors import OperationFailedError

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """String values under string keys."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...


class MemoryStorage(KeyValueStorage):
    """Process-local storage (nothing survives a restart)."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """All keys in one JSON object file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable store file {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring store file {self.path}: top level is not an object")
            return {}
        return data

    def _write(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            raise OperationFailedError(
                "could not write store file",
                details={"path": str(self.path)},
                cause=exc,
            ) from exc


class KeyringStorage(KeyValueStorage):
    """Thin wrapper around the OS keyring."""

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name

    def get(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError as exc:
            raise OperationFailedError(
                "keyring read failed",
                details={"service": self.service_name, "key": key},
                cause=exc,
            ) from exc

    def set(self, key: str, value: str) -> None:
        try:
            keyring.set_password(self.service_name, key, value)
        except KeyringError as exc:
            raise OperationFailedError(
                "keyring write failed",
                details={"service": self.service_name, "key": key},
                cause=exc,
            ) from exc

    def delete(self, key: str) -> None:
        try:
            keyring.delete_password(self.service_name, key)
        except PasswordDeleteError:
            pass
        except KeyringError as exc:
            raise OperationFailedError(
                "keyring delete failed",
                details={"service": self.service_name, "key": key},
                cause=exc,
            ) from exc
