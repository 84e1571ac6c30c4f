"""Runtime settings for cloudfilemgr."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from cloudfilemgr.backends.operations import LatencyProfile

ENV_LATENCY_SCALE = "CLOUDFILEMGR_LATENCY_SCALE"
ENV_SEARCH_DEBOUNCE_MS = "CLOUDFILEMGR_SEARCH_DEBOUNCE_MS"
ENV_STORE_PATH = "CLOUDFILEMGR_STORE_PATH"

DEFAULT_STORAGE_KEY = "connected_providers"
DEFAULT_KEYRING_SERVICE = "cloudfilemgr"
DEFAULT_SEARCH_DEBOUNCE_SEC = 0.3


@dataclass(slots=True, frozen=True)
class Settings:
    """
    Settings shared by the registry, the session store and browsing sessions.

    Attributes:
        latency: simulated latency per operation class.
        search_debounce_sec: quiet interval before a search query is dispatched.
        storage_key: key under which connected providers are persisted.
        keyring_service: service name used with the OS keyring.
        store_path: JSON file for persistence; None selects the keyring.
    """

    latency: LatencyProfile = field(default_factory=LatencyProfile)
    search_debounce_sec: float = DEFAULT_SEARCH_DEBOUNCE_SEC
    storage_key: str = DEFAULT_STORAGE_KEY
    keyring_service: str = DEFAULT_KEYRING_SERVICE
    store_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.latency, LatencyProfile):
            raise TypeError("Settings.latency must be a LatencyProfile")
        if self.search_debounce_sec < 0:
            raise ValueError("Settings.search_debounce_sec must be >= 0")
        for name in ("storage_key", "keyring_service"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Settings.{name} must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Recognized:
            - CLOUDFILEMGR_LATENCY_SCALE: float multiplier (0 disables latency)
            - CLOUDFILEMGR_SEARCH_DEBOUNCE_MS: integer milliseconds
            - CLOUDFILEMGR_STORE_PATH: JSON file used instead of the keyring
        """
        env = os.environ if environ is None else environ

        latency = LatencyProfile()
        scale_raw = env.get(ENV_LATENCY_SCALE, "").strip()
        if scale_raw:
            try:
                scale = float(scale_raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_LATENCY_SCALE} must be a number") from exc
            latency = latency.scaled(scale)

        debounce = DEFAULT_SEARCH_DEBOUNCE_SEC
        debounce_raw = env.get(ENV_SEARCH_DEBOUNCE_MS, "").strip()
        if debounce_raw:
            if not debounce_raw.isdigit():
                raise ValueError(f"{ENV_SEARCH_DEBOUNCE_MS} must be a non-negative integer")
            debounce = int(debounce_raw) / 1000.0

        store_path = env.get(ENV_STORE_PATH, "").strip() or None

        return cls(
            latency=latency,
            search_debounce_sec=debounce,
            store_path=store_path,
        )
