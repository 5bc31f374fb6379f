"""Exception hierarchy and HTTP error mapping for gdriveclient."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveClientError(Exception):
    """
    Base exception for gdriveclient.

    Attributes:
        details: Optional structured information (e.g., HTTP status, reason).
        cause: Optional original exception that triggered this error.
    """

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


class AuthError(GDriveClientError):
    """Raised when OAuth authentication/refresh fails."""


class AuthTimeoutError(AuthError):
    """Raised when interactive authorization does not finish within the bound."""


class LocalFileNotFoundError(GDriveClientError):
    """Raised when the local source file for an upload does not exist."""


class InvalidParentError(GDriveClientError):
    """Raised when a supplied parent id does not resolve to a folder."""


class NotAFolderError(GDriveClientError):
    """Raised when a listing target is not a folder."""


class InvalidStateError(GDriveClientError):
    """Raised when the library is used in an invalid state (e.g., not authenticated)."""


class TransportError(GDriveClientError):
    """Raised when a Drive request fails (backend or network)."""


class InvalidArgumentError(TransportError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(TransportError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class PermissionError(TransportError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class QuotaExceededError(TransportError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class ConflictError(TransportError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(TransportError):
    """Raised when rate-limited (HTTP 429)."""


class NetworkError(TransportError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(TransportError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdriveclient exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveClientError:
    """
    Map an HTTP error to a gdriveclient exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related,
                 or RateLimitError for per-user rate limits
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if info.reason in ("rateLimitExceeded", "userRateLimitExceeded"):
            return RateLimitError(message, details=details, cause=cause)
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
