"""ProviderConnectionController: connect/disconnect flows."""

from __future__ import annotations

import logging
from typing import Optional

from cloudfilemgr.app_state import AppState
from cloudfilemgr.auth import AuthSessionStore
from cloudfilemgr.errors import AuthenticationFailedError, CloudFileMgrError
from cloudfilemgr.models import ConnectedProvider, ProviderType
from cloudfilemgr.registry import ProviderRegistry

logger = logging.getLogger(__name__)

PLACEHOLDER_ACCOUNT_EMAIL = "user@example.com"


class ProviderConnectionController:
    """Authenticate against backends and keep the persisted record in step."""

    def __init__(
        self,
        registry: ProviderRegistry,
        store: AuthSessionStore,
        *,
        app_state: Optional[AppState] = None,
    ) -> None:
        self._registry = registry
        self._store = store
        self.app_state = app_state if app_state is not None else AppState(store)
        self.is_authenticating = False
        self.error: Optional[CloudFileMgrError] = None

    def available_providers(self) -> list[ProviderType]:
        return list(ProviderType)

    async def connect(self, provider_type: ProviderType) -> ConnectedProvider:
        """
        Authenticate and persist a new connection.

        Raises:
            ProviderNotRegisteredError: no backend implements provider_type.
            AuthenticationFailedError: the handshake returned False or failed.
        """
        self.error = None
        self.is_authenticating = True
        try:
            provider = await self._connect(provider_type)
        except CloudFileMgrError as exc:
            self.error = exc
            raise
        finally:
            self.is_authenticating = False

        logger.info(f"Connected {provider_type.value} as {provider.id}")
        return provider

    async def _connect(self, provider_type: ProviderType) -> ConnectedProvider:
        backend = self._registry.require(provider_type)

        try:
            success = await backend.authenticate()
        except CloudFileMgrError:
            raise
        except Exception as exc:
            raise AuthenticationFailedError(
                str(exc),
                details={"provider": provider_type.value},
                cause=exc,
            ) from exc

        if not success:
            raise AuthenticationFailedError(
                "provider rejected the handshake",
                details={"provider": provider_type.value},
            )

        provider = ConnectedProvider(
            type=provider_type,
            is_connected=True,
            account_email=PLACEHOLDER_ACCOUNT_EMAIL,
        )
        self._store.add_connection(provider)
        self.app_state.add_provider(provider)
        return provider

    async def disconnect(self, provider: ConnectedProvider) -> None:
        backend = self._registry.resolve(provider.type)
        if backend is not None:
            backend.disconnect()
        self._store.remove_connection(provider)
        self.app_state.remove_provider(provider)
        logger.info(f"Disconnected {provider.type.value} ({provider.id})")
