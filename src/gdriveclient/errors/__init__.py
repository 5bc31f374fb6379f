"""Public error exports for gdriveclient."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    AuthTimeoutError,
    ConflictError,
    GDriveClientError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidParentError,
    InvalidStateError,
    LocalFileNotFoundError,
    NetworkError,
    NotAFolderError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
    map_http_error,
)

__all__ = [
    "GDriveClientError",
    "AuthError",
    "AuthTimeoutError",
    "LocalFileNotFoundError",
    "InvalidParentError",
    "NotAFolderError",
    "InvalidStateError",
    "TransportError",
    "InvalidArgumentError",
    "NotFoundError",
    "PermissionError",
    "QuotaExceededError",
    "ConflictError",
    "RateLimitError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
