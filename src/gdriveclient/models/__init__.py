"""Public model exports for gdriveclient."""

from __future__ import annotations

from .object_record import ANYONE_TYPE, ObjectRecord, PermissionEntry
from .results import DeleteResult, DeleteStatus, LookupResult, LookupStatus

__all__ = [
    "ANYONE_TYPE",
    "ObjectRecord",
    "PermissionEntry",
    "LookupStatus",
    "DeleteStatus",
    "LookupResult",
    "DeleteResult",
]
