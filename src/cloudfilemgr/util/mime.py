from __future__ import annotations

import posixpath

GOOGLE_FOLDER_MIME: str = "application/vnd.google-apps.folder"
GENERIC_FOLDER_MIME: str = "folder"
OCTET_STREAM: str = "application/octet-stream"

PREVIEWABLE_EXTENSIONS: frozenset[str] = frozenset(
    {"jpg", "jpeg", "png", "gif", "pdf", "txt", "md"}
)


def file_extension(name: str) -> str:
    """Return the lower-cased extension of name without the dot ('' if none)."""
    _, ext = posixpath.splitext(name)
    return ext[1:].lower()


def is_previewable_name(name: str) -> bool:
    return file_extension(name) in PREVIEWABLE_EXTENSIONS
