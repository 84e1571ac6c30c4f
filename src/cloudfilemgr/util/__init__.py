from .ids import new_connection_id, new_item_id, new_uuid
from .mime import (
    GENERIC_FOLDER_MIME,
    GOOGLE_FOLDER_MIME,
    OCTET_STREAM,
    PREVIEWABLE_EXTENSIONS,
    file_extension,
    is_previewable_name,
)
from .time import ago, now_utc

__all__ = [
    "new_uuid",
    "new_item_id",
    "new_connection_id",
    "GOOGLE_FOLDER_MIME",
    "GENERIC_FOLDER_MIME",
    "OCTET_STREAM",
    "PREVIEWABLE_EXTENSIONS",
    "file_extension",
    "is_previewable_name",
    "now_utc",
    "ago",
]
