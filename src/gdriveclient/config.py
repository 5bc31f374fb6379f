"""Runtime configuration for gdriveclient."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DRIVE_SCOPE: str = "https://www.googleapis.com/auth/drive"

DEFAULT_AUTH_TIMEOUT_SEC: float = 30.0
DEFAULT_TOKEN_FILENAME: str = "GoogleDriveAuthCache.json"

# Resumable upload chunks must be a multiple of 256 KiB.
CHUNK_ALIGNMENT: int = 256 * 1024
DEFAULT_CHUNK_SIZE: int = 4 * CHUNK_ALIGNMENT


def default_cache_dir() -> str:
    """Credential cache directory under the user's home (~/.credentials)."""
    return str(Path.home() / ".credentials")


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """
    Client configuration.

    Attributes:
        scopes: OAuth scopes requested during authorization.
        auth_timeout_sec: Upper bound for (interactive) authorization.
        cache_dir: Directory holding the cached token. Deleted wholesale on
            reauthentication.
        token_filename: Token file name inside cache_dir.
        chunk_size: Resumable transfer chunk size in bytes.
        spaces: Drive `spaces` used for listing/search.
    """

    scopes: tuple[str, ...] = (DRIVE_SCOPE,)
    auth_timeout_sec: float = DEFAULT_AUTH_TIMEOUT_SEC
    cache_dir: str = field(default_factory=default_cache_dir)
    token_filename: str = DEFAULT_TOKEN_FILENAME
    chunk_size: int = DEFAULT_CHUNK_SIZE
    spaces: str = "drive"

    def __post_init__(self) -> None:
        if not self.scopes or not all(isinstance(s, str) and s.strip() for s in self.scopes):
            raise ValueError("ClientConfig.scopes must be a non-empty sequence of strings")
        if self.auth_timeout_sec <= 0:
            raise ValueError("ClientConfig.auth_timeout_sec must be positive")
        if not isinstance(self.cache_dir, str) or not self.cache_dir.strip():
            raise ValueError("ClientConfig.cache_dir must be a non-empty string")
        if not self.token_filename or os.sep in self.token_filename:
            raise ValueError("ClientConfig.token_filename must be a plain file name")
        if self.chunk_size <= 0 or self.chunk_size % CHUNK_ALIGNMENT != 0:
            raise ValueError(
                f"ClientConfig.chunk_size must be a positive multiple of {CHUNK_ALIGNMENT}"
            )

    @property
    def token_file(self) -> str:
        return os.path.join(self.cache_dir, self.token_filename)

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> ClientConfig:
        """
        Build a config from environment variables, falling back to defaults.

        Recognized variables:
            - GDRIVECLIENT_SCOPES: comma-separated scopes
            - GDRIVECLIENT_AUTH_TIMEOUT: seconds (float)
            - GDRIVECLIENT_CACHE_DIR
            - GDRIVECLIENT_CHUNK_SIZE: bytes (int)
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        scopes_raw = env.get("GDRIVECLIENT_SCOPES", "").strip()
        if scopes_raw:
            kwargs["scopes"] = tuple(s.strip() for s in scopes_raw.split(",") if s.strip())

        timeout_raw = env.get("GDRIVECLIENT_AUTH_TIMEOUT", "").strip()
        if timeout_raw:
            kwargs["auth_timeout_sec"] = float(timeout_raw)

        cache_dir = env.get("GDRIVECLIENT_CACHE_DIR", "").strip()
        if cache_dir:
            kwargs["cache_dir"] = os.path.expanduser(cache_dir)

        chunk_raw = env.get("GDRIVECLIENT_CHUNK_SIZE", "").strip()
        if chunk_raw:
            kwargs["chunk_size"] = int(chunk_raw)

        return cls(**kwargs)  # type: ignore[arg-type]
