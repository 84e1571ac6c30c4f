"""ProviderRegistry: resolves a ProviderType to its backend instance."""

from __future__ import annotations

import functools
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from cloudfilemgr.backends import (
    DropboxBackend,
    GoogleDriveBackend,
    LatencyProfile,
    OneDriveBackend,
    StorageBackend,
)
from cloudfilemgr.errors import InvalidOperationError, ProviderNotRegisteredError
from cloudfilemgr.models import ProviderType
from cloudfilemgr.settings import Settings

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Read-only table of backend instances, one per implemented provider.

    Notes:
        - The table is fixed at construction; there is no runtime registration.
        - ICLOUD_DRIVE has no backend and resolves to None.
    """

    def __init__(self, backends: Iterable[StorageBackend]) -> None:
        table: dict[ProviderType, StorageBackend] = {}
        for backend in backends:
            if backend.provider in table:
                raise InvalidOperationError(
                    "Duplicate backend for provider",
                    details={"provider": backend.provider.value},
                )
            table[backend.provider] = backend
        self._backends: Mapping[ProviderType, StorageBackend] = MappingProxyType(table)

    @classmethod
    def create_default(cls, latency: Optional[LatencyProfile] = None) -> ProviderRegistry:
        """Build the standard registry (Google Drive, Dropbox, OneDrive)."""
        registry = cls(
            [
                GoogleDriveBackend(latency),
                DropboxBackend(latency),
                OneDriveBackend(latency),
            ]
        )
        logger.debug(
            "Provider registry built: "
            + ", ".join(p.value for p in registry.provider_types())
        )
        return registry

    def resolve(self, provider: ProviderType) -> Optional[StorageBackend]:
        return self._backends.get(provider)

    def require(self, provider: ProviderType) -> StorageBackend:
        """
        Resolve a backend or fail.

        Raises:
            ProviderNotRegisteredError: if no backend implements the provider.
        """
        backend = self._backends.get(provider)
        if backend is None:
            raise ProviderNotRegisteredError(
                f"No backend registered for provider: {provider.value}",
                details={"provider": provider.value},
            )
        return backend

    def is_supported(self, provider: ProviderType) -> bool:
        return provider in self._backends

    def provider_types(self) -> list[ProviderType]:
        return list(self._backends.keys())


@functools.lru_cache(maxsize=None)
def default_registry() -> ProviderRegistry:
    """Process-wide registry, built on first use with settings from the environment."""
    return ProviderRegistry.create_default(Settings.from_env().latency)
