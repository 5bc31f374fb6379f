"""Typed results for lookup/delete operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from gdriveclient.errors import GDriveClientError

from .object_record import ObjectRecord


LookupStatus = Literal["found", "not_found", "failed"]
DeleteStatus = Literal["deleted", "not_found", "failed"]


@dataclass(slots=True)
class LookupResult:
    """Result of fetching one object by id."""

    status: LookupStatus
    record: ObjectRecord = field(default_factory=ObjectRecord.not_found)
    error: Optional[GDriveClientError] = None

    @property
    def found(self) -> bool:
        return self.status == "found"


@dataclass(slots=True)
class DeleteResult:
    """Result of deleting one object by id."""

    file_id: str
    status: DeleteStatus
    error: Optional[GDriveClientError] = None

    @property
    def ok(self) -> bool:
        return self.status == "deleted"
