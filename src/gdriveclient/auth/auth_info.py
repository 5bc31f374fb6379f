"""Authentication information for gdriveclient (installed-app OAuth)."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Attributes:
        application_name: Name reported to the Drive API (user agent).
        client_secrets_file: Path to the OAuth client secrets JSON.
        token_file: Path of the cached authorized-user token JSON. Created on
            first successful authorization.
    """

    application_name: str
    client_secrets_file: str
    token_file: str

    def __post_init__(self) -> None:
        for name in ("application_name", "client_secrets_file", "token_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{name} must be a non-empty string")

    @property
    def cache_dir(self) -> str:
        """Directory that holds the token file."""
        return os.path.dirname(self.token_file)
