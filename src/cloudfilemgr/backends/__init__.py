"""Storage backends for cloudfilemgr."""

from __future__ import annotations

from .base import InMemoryBackend, StorageBackend
from .dropbox import DropboxBackend
from .file_table import FileTable, ReadWriteLock
from .google_drive import GoogleDriveBackend
from .onedrive import OneDriveBackend
from .operations import LatencyClass, LatencyProfile, Operation

__all__ = [
    "StorageBackend",
    "InMemoryBackend",
    "GoogleDriveBackend",
    "DropboxBackend",
    "OneDriveBackend",
    "FileTable",
    "ReadWriteLock",
    "LatencyProfile",
    "LatencyClass",
    "Operation",
]
