"""Data model for cloud files and folders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cloudfilemgr.util.mime import file_extension, is_previewable_name

from .provider import ProviderType


@dataclass(slots=True, frozen=True)
class FileItem:
    """
    A file or folder as reported by a backend.

    Notes:
        - parent_id is None only for a provider's root.
        - path is informational only; lookups always go through id.
    """

    id: str
    name: str
    is_folder: bool
    provider: ProviderType
    parent_id: Optional[str] = None
    path: str = "/"

    size: Optional[int] = None
    modified_date: Optional[datetime] = None
    mime_type: Optional[str] = None
    thumbnail_url: Optional[str] = None
    download_url: Optional[str] = None

    def __post_init__(self) -> None:
        if self.size is not None and self.size < 0:
            raise ValueError("FileItem.size must be non-negative")

    @property
    def file_extension(self) -> str:
        return file_extension(self.name)

    @property
    def is_previewable(self) -> bool:
        return not self.is_folder and is_previewable_name(self.name)
