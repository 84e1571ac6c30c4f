"""Local preconditions checked before a session calls its backend."""

from __future__ import annotations

from cloudfilemgr.errors import InvalidOperationError
from cloudfilemgr.models import FileItem


def validate_destination_is_folder(destination: FileItem, action: str) -> None:
    if not destination.is_folder:
        raise InvalidOperationError(
            f"{action} destination must be a folder: {destination.id}",
            details={"action": action, "destination_id": destination.id},
        )

