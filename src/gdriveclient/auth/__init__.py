"""Public auth exports for gdriveclient."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import OAuthClient
from .session import DriveSession

__all__ = ["AuthInfo", "OAuthClient", "DriveSession"]
