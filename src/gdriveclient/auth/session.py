"""DriveSession: one authenticated credential + Drive service handle."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import threading
from typing import Optional

from gdriveclient.config import ClientConfig
from gdriveclient.controller import GoogleDriveController
from gdriveclient.errors import AuthTimeoutError, InvalidStateError

from .auth_info import AuthInfo
from .oauth_client import OAuthClient

logger = logging.getLogger(__name__)


class DriveSession:
    """
    An authenticated Drive session.

    Create one with `await DriveSession.create(...)` and pass it to every
    service. Sessions are independent of each other; there is no global
    state.

    Concurrency:
        - Safe to share between concurrently running operations; every Drive
          request gets its own HTTP connection.
        - `reauthenticate()` swaps in a new controller and bumps `version`.
          Operations that already captured the old controller finish against
          it, but callers must not start new operations until it returns.
    """

    def __init__(
        self,
        auth_info: Optional[AuthInfo],
        *,
        config: Optional[ClientConfig] = None,
        oauth_client: Optional[OAuthClient] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._auth_info = auth_info
        self._oauth_client = oauth_client
        if self._oauth_client is None and auth_info is not None:
            self._oauth_client = OAuthClient(auth_info)
        self._controller: Optional[GoogleDriveController] = None
        self._version = 0
        self._reauth_lock = asyncio.Lock()

    @classmethod
    async def create(
        cls,
        application_name: str,
        client_secrets_file: str,
        *,
        config: Optional[ClientConfig] = None,
    ) -> DriveSession:
        """
        Build and authenticate a session.

        Raises:
            AuthTimeoutError: if authorization does not complete in time.
            AuthError: on any other authorization failure.
        """
        config = config or ClientConfig()
        auth_info = AuthInfo(
            application_name=application_name,
            client_secrets_file=client_secrets_file,
            token_file=config.token_file,
        )
        session = cls(auth_info, config=config)
        await session.authenticate()
        return session

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        *,
        config: Optional[ClientConfig] = None,
    ) -> DriveSession:
        """Create an already-usable session around a controller (useful for tests)."""
        session = cls(None, config=config)
        session._controller = controller
        session._version = 1
        return session

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def version(self) -> int:
        """Incremented on every successful (re)authentication."""
        return self._version

    @property
    def is_authenticated(self) -> bool:
        return self._controller is not None

    @property
    def controller(self) -> GoogleDriveController:
        if self._controller is None:
            raise InvalidStateError("Session is not authenticated. Call authenticate() first.")
        return self._controller

    async def authenticate(self) -> None:
        """
        Obtain credentials and build the Drive service, bounded by
        `config.auth_timeout_sec`.

        The credential lookup (and, if needed, the interactive flow) runs on
        a worker thread. If the bound elapses first, the worker is signalled
        to cancel: it will not write the token cache and its result is
        discarded. The interactive flow is bounded by the same limit, so the
        worker ends on its own shortly after.
        """
        if self._oauth_client is None:
            raise InvalidStateError("Session has no OAuth client to authenticate with")

        timeout = self._config.auth_timeout_sec
        cancel_event = threading.Event()
        try:
            creds = await asyncio.wait_for(
                asyncio.to_thread(
                    self._oauth_client.get_credentials,
                    self._config.scopes,
                    cancel_event=cancel_event,
                    timeout_seconds=timeout,
                ),
                timeout=timeout,
            )
        except asyncio.TimeoutError as exc:
            cancel_event.set()
            raise AuthTimeoutError(
                "Authorization did not complete in time",
                details={"timeout_sec": timeout},
                cause=exc,
            ) from exc
        except asyncio.CancelledError:
            cancel_event.set()
            raise

        service = await asyncio.to_thread(self._oauth_client.build_drive_service, creds)
        self._controller = GoogleDriveController(service)
        self._version += 1
        logger.info(f"Drive session authenticated (version {self._version})")

    async def reauthenticate(self) -> None:
        """
        Delete the credential cache directory and authenticate again.

        Used to force re-consent or to switch accounts.
        """
        async with self._reauth_lock:
            cache_dir = self._config.cache_dir
            if os.path.isdir(cache_dir):
                await asyncio.to_thread(shutil.rmtree, cache_dir, True)
                logger.info(f"Deleted credential cache {cache_dir}")
            await self.authenticate()
