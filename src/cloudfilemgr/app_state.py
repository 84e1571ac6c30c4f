"""Process-wide connected-provider state read by presentation collaborators."""

from __future__ import annotations

from typing import Optional

from cloudfilemgr.auth import AuthSessionStore
from cloudfilemgr.models import ConnectedProvider, ProviderType


class AppState:
    """Connected providers, seeded from the session store."""

    def __init__(self, store: AuthSessionStore) -> None:
        self._store = store
        self.connected_providers: list[ConnectedProvider] = []
        self.reload()

    def reload(self) -> None:
        self.connected_providers = self._store.load()

    def add_provider(self, provider: ConnectedProvider) -> None:
        if not any(p.id == provider.id for p in self.connected_providers):
            self.connected_providers.append(provider)

    def remove_provider(self, provider: ConnectedProvider) -> None:
        self.connected_providers = [
            p for p in self.connected_providers if p.id != provider.id
        ]

    def find(self, provider_type: ProviderType) -> Optional[ConnectedProvider]:
        """First connection of the given type, if any."""
        for provider in self.connected_providers:
            if provider.type is provider_type:
                return provider
        return None
