"""gdriveclient public API."""

from __future__ import annotations

import logging

from gdriveclient.auth import AuthInfo, DriveSession, OAuthClient
from gdriveclient.client import GoogleDrive
from gdriveclient.config import ClientConfig
from gdriveclient.errors import (
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
from gdriveclient.models import (
    DeleteResult,
    LookupResult,
    ObjectRecord,
    PermissionEntry,
)
from gdriveclient.services import (
    ObjectService,
    PermissionService,
    QueryEngine,
    TransferEngine,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "GoogleDrive",
    "ClientConfig",
    # Auth
    "AuthInfo",
    "OAuthClient",
    "DriveSession",
    # Services
    "ObjectService",
    "PermissionService",
    "QueryEngine",
    "TransferEngine",
    # Models
    "ObjectRecord",
    "PermissionEntry",
    "LookupResult",
    "DeleteResult",
    # Errors
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
