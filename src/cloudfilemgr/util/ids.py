from __future__ import annotations

import uuid


def new_uuid() -> str:
    """Generate a UUID4 string."""
    return str(uuid.uuid4())


def new_item_id(prefix: str) -> str:
    """Generate a fresh provider-prefixed file id (e.g. 'gdrive_<uuid>')."""
    return f"{prefix}{new_uuid()}"


def new_connection_id() -> str:
    """Generate a new ConnectedProvider id."""
    return new_uuid()
