"""Public auth exports for cloudfilemgr."""

from __future__ import annotations

from .session_store import AuthSessionStore
from .storage import JsonFileStorage, KeyringStorage, KeyValueStorage, MemoryStorage

__all__ = [
    "AuthSessionStore",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "KeyringStorage",
]
