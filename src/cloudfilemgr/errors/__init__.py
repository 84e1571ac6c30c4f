"""Public error exports for cloudfilemgr."""

from __future__ import annotations

from .exceptions import (
    AuthenticationFailedError,
    CloudFileMgrError,
    InvalidOperationError,
    NetworkError,
    NotFoundError,
    OperationFailedError,
    PermissionError,
    ProviderNotConnectedError,
    ProviderNotRegisteredError,
    wrap_unexpected,
)

__all__ = [
    "CloudFileMgrError",
    "AuthenticationFailedError",
    "NetworkError",
    "NotFoundError",
    "OperationFailedError",
    "PermissionError",
    "InvalidOperationError",
    "ProviderNotConnectedError",
    "ProviderNotRegisteredError",
    "wrap_unexpected",
]
