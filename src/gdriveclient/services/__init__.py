"""Drive services bound to a DriveSession."""

from __future__ import annotations

from .objects import ObjectService
from .permissions import PermissionService
from .query import QueryEngine
from .transfer import ProgressCallback, TransferEngine

__all__ = [
    "ObjectService",
    "PermissionService",
    "QueryEngine",
    "TransferEngine",
    "ProgressCallback",
]
