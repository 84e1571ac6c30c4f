"""Exception hierarchy and failure normalization for cloudfilemgr."""

from __future__ import annotations

from typing import Any, Optional


class CloudFileMgrError(Exception):
    """
    Base exception for cloudfilemgr.

    Attributes:
        details: Optional structured information (e.g., file id, provider).
        cause: Optional original exception that triggered this error.
    """

    recovery_suggestion: str = "Please try again."

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthenticationFailedError(CloudFileMgrError):
    """Raised when a provider handshake does not succeed."""

    recovery_suggestion = "Please check your credentials and try again."

    def __init__(
        self,
        reason: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"Authentication failed: {reason}", details=details, cause=cause)
        self.reason = reason


class NetworkError(CloudFileMgrError):
    """Raised for unexpected underlying failures not otherwise classified."""

    recovery_suggestion = "Please check your internet connection."


class NotFoundError(CloudFileMgrError):
    """Raised when a file id is not present in the provider's namespace."""

    recovery_suggestion = "The file may have been moved or deleted."


class OperationFailedError(CloudFileMgrError):
    """Raised when a backend operation fails for a known reason."""

    def __init__(
        self,
        reason: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(f"Operation failed: {reason}", details=details, cause=cause)
        self.reason = reason


class PermissionError(CloudFileMgrError):
    """Raised when access is denied (reserved; no simulated backend raises it)."""

    recovery_suggestion = "Please grant necessary permissions."


class InvalidOperationError(CloudFileMgrError):
    """Raised when an operation is rejected locally (e.g., move target is a file)."""


class ProviderNotConnectedError(CloudFileMgrError):
    """Raised by every backend operation while the backend is not authenticated."""

    recovery_suggestion = "Please connect to the cloud provider first."


class ProviderNotRegisteredError(CloudFileMgrError):
    """Raised when the registry has no backend for a provider type."""

    recovery_suggestion = "This provider is not available in this build."


def wrap_unexpected(
    exc: BaseException,
    *,
    details: Optional[dict[str, Any]] = None,
) -> CloudFileMgrError:
    """
    Normalize an exception into the cloudfilemgr taxonomy.

    Policy:
        - cloudfilemgr errors pass through unchanged
        - anything else -> NetworkError with the original kept as cause
    """
    if isinstance(exc, CloudFileMgrError):
        return exc
    return NetworkError(f"Network error: {exc}", details=details, cause=exc)
