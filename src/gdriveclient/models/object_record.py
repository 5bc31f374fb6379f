"""Data model for Drive objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdriveclient.util.mime import is_folder

ANYONE_TYPE: str = "anyone"


@dataclass(slots=True, frozen=True)
class PermissionEntry:
    """A single permission attached to a Drive object."""

    id: str = ""
    type: str = ""
    role: str = ""
    email_address: str = ""
    domain: str = ""
    allow_file_discovery: bool = False

    @property
    def is_public(self) -> bool:
        return self.type == ANYONE_TYPE


@dataclass(slots=True)
class ObjectRecord:
    """
    A file or folder as returned by Drive.

    Notes:
        - `is_folder` is derived from `mime_type`; it is never stored.
        - The not-found sentinel (`ObjectRecord.not_found()`) has `found=False`
          and every other field at its zero value.
    """

    id: str = ""
    name: str = ""
    mime_type: str = ""
    parents: list[str] = field(default_factory=list)
    is_shared: bool = False
    link: str = ""
    permissions: list[PermissionEntry] = field(default_factory=list)
    found: bool = True

    @classmethod
    def not_found(cls) -> ObjectRecord:
        return cls(found=False)

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def has_public_link(self) -> bool:
        """True if an "anyone with the link" permission is attached."""
        return any(p.is_public for p in self.permissions)
