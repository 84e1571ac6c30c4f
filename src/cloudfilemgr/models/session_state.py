"""Published state of a FileBrowsingSession."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cloudfilemgr.errors import CloudFileMgrError

from .file_item import FileItem


@dataclass(slots=True, frozen=True)
class SessionState:
    """Immutable snapshot handed to presentation-layer listeners."""

    files: tuple[FileItem, ...] = field(default_factory=tuple)
    current_folder: Optional[FileItem] = None
    is_loading: bool = False
    error: Optional[CloudFileMgrError] = None
    search_query: str = ""
