"""Browsing session exports for cloudfilemgr."""

from __future__ import annotations

from .browser import FileBrowsingSession
from .validators import validate_destination_is_folder

__all__ = ["FileBrowsingSession", "validate_destination_is_folder"]
