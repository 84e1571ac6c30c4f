"""cloudfilemgr public API."""

from __future__ import annotations

import logging

from cloudfilemgr.app_state import AppState
from cloudfilemgr.auth import (
    AuthSessionStore,
    JsonFileStorage,
    KeyringStorage,
    KeyValueStorage,
    MemoryStorage,
)
from cloudfilemgr.backends import (
    DropboxBackend,
    GoogleDriveBackend,
    InMemoryBackend,
    LatencyProfile,
    OneDriveBackend,
    StorageBackend,
)
from cloudfilemgr.connection import ProviderConnectionController
from cloudfilemgr.errors import (
    AuthenticationFailedError,
    CloudFileMgrError,
    InvalidOperationError,
    NetworkError,
    NotFoundError,
    OperationFailedError,
    PermissionError,
    ProviderNotConnectedError,
    ProviderNotRegisteredError,
    wrap_unexpected,
)
from cloudfilemgr.log import configure_logging
from cloudfilemgr.models import ConnectedProvider, FileItem, ProviderType, SessionState
from cloudfilemgr.registry import ProviderRegistry, default_registry
from cloudfilemgr.session import FileBrowsingSession
from cloudfilemgr.settings import Settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "FileBrowsingSession",
    "ProviderConnectionController",
    "ProviderRegistry",
    "default_registry",
    "AppState",
    "Settings",
    "configure_logging",
    # Backends
    "StorageBackend",
    "InMemoryBackend",
    "GoogleDriveBackend",
    "DropboxBackend",
    "OneDriveBackend",
    "LatencyProfile",
    # Persistence
    "AuthSessionStore",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "KeyringStorage",
    # Models
    "FileItem",
    "ProviderType",
    "ConnectedProvider",
    "SessionState",
    # Errors
    "CloudFileMgrError",
    "AuthenticationFailedError",
    "NetworkError",
    "NotFoundError",
    "OperationFailedError",
    "PermissionError",
    "InvalidOperationError",
    "ProviderNotConnectedError",
    "ProviderNotRegisteredError",
    "wrap_unexpected",
]
