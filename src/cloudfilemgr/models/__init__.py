"""Public model exports for cloudfilemgr."""

from __future__ import annotations

from .file_item import FileItem
from .provider import ConnectedProvider, ProviderType
from .session_state import SessionState

__all__ = [
    "FileItem",
    "ProviderType",
    "ConnectedProvider",
    "SessionState",
]
