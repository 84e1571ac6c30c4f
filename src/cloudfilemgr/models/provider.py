"""Provider identity and the persisted connected-provider record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from cloudfilemgr.util.ids import new_connection_id


class ProviderType(str, Enum):
    """Supported cloud providers. Values are display labels and the wire form."""

    GOOGLE_DRIVE = "Google Drive"
    DROPBOX = "Dropbox"
    ONEDRIVE = "OneDrive"
    ICLOUD_DRIVE = "iCloud Drive"

    @property
    def label(self) -> str:
        return self.value


@dataclass(slots=True)
class ConnectedProvider:
    """
    Persisted proof that the user authenticated against a provider.

    Notes:
        - Uniqueness is by id, not by type.
        - display_name defaults to the type's label.
    """

    type: ProviderType
    id: str = field(default_factory=new_connection_id)
    display_name: str = ""
    is_connected: bool = False
    account_email: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, ProviderType):
            self.type = ProviderType(self.type)
        if not self.display_name:
            self.display_name = self.type.label

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted record layout."""
        return {
            "id": self.id,
            "type": self.type.value,
            "displayName": self.display_name,
            "isConnected": self.is_connected,
            "accountEmail": self.account_email,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConnectedProvider:
        """
        Parse a persisted record.

        Raises:
            ValueError: if a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("connected provider record must be an object")

        record_id = data.get("id")
        if not isinstance(record_id, str) or not record_id:
            raise ValueError("connected provider record has no id")

        is_connected = data.get("isConnected", False)
        if not isinstance(is_connected, bool):
            raise ValueError("isConnected must be a boolean")

        display_name = data.get("displayName") or ""
        account_email = data.get("accountEmail")
        if account_email is not None and not isinstance(account_email, str):
            raise ValueError("accountEmail must be a string or null")

        return cls(
            type=ProviderType(data.get("type")),
            id=record_id,
            display_name=display_name if isinstance(display_name, str) else "",
            is_connected=is_connected,
            account_email=account_email,
        )
