"""OAuth client utilities for gdriveclient."""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Sequence

from gdriveclient.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)


class OAuthClient:
    """Create and cache OAuth credentials and build Drive API service objects."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    @property
    def auth_info(self) -> AuthInfo:
        return self._auth_info

    def get_credentials(
        self,
        scopes: Sequence[str],
        *,
        cancel_event: Optional[threading.Event] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Return OAuth credentials for the given scopes.

        A cached token is reused (and refreshed when expired). Otherwise the
        interactive installed-app flow runs on a local redirect server.

        Args:
            scopes: OAuth scopes.
            cancel_event: Cooperative cancel signal. Once set, a completing
                flow discards its result and the token cache is not written.
            timeout_seconds: Upper bound for waiting on the browser redirect.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on load/refresh/flow failures or cancellation.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        try:
            from google.auth.transport.requests import Request
            from google.oauth2.credentials import Credentials
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth and google-auth-oauthlib"},
                cause=exc,
            ) from exc

        token_file = self._auth_info.token_file

        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(token_file, scopes=list(scopes))
            except Exception as exc:
                raise AuthError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not creds.valid and creds.refresh_token:
                try:
                    creds.refresh(Request())
                except Exception as exc:
                    raise AuthError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": token_file},
                        cause=exc,
                    ) from exc
                self._save_credentials(creds, cancel_event)

            if creds.valid:
                logger.debug(f"Using cached credentials from {token_file}")
                return creds

        client_secrets = self._auth_info.client_secrets_file
        if not os.path.isfile(client_secrets):
            raise AuthError(
                "client_secrets_file does not exist",
                details={"client_secrets_file": client_secrets},
            )

        _raise_if_cancelled(cancel_event)
        logger.info("Starting interactive OAuth authorization flow")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                client_secrets,
                scopes=list(scopes),
            )
            creds = flow.run_local_server(port=0, timeout_seconds=timeout_seconds)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={
                    "client_secrets_file": client_secrets,
                    "token_file": token_file,
                },
                cause=exc,
            ) from exc

        self._save_credentials(creds, cancel_event)
        return creds

    def build_drive_service(self, creds):
        """
        Build a Drive API service resource that identifies as the application.

        Every request gets its own authorized Http, so requests built and
        executed on different worker threads never share a connection.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            import httplib2
            from google_auth_httplib2 import AuthorizedHttp
            from googleapiclient.discovery import build
            from googleapiclient.http import HttpRequest, set_user_agent
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        application_name = self._auth_info.application_name

        def authorized_http():
            http = AuthorizedHttp(creds, http=httplib2.Http())
            return set_user_agent(http, application_name)

        def build_request(_http, *args, **kwargs):
            # httplib2.Http is not thread-safe: one per request.
            return HttpRequest(authorized_http(), *args, **kwargs)

        try:
            return build(
                "drive",
                "v3",
                http=authorized_http(),
                requestBuilder=build_request,
                cache_discovery=False,
            )
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    def _save_credentials(self, creds, cancel_event: Optional[threading.Event]) -> None:
        _raise_if_cancelled(cancel_event)

        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        if token_dir:
            os.makedirs(token_dir, exist_ok=True)

        try:
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except Exception as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc


def _raise_if_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise AuthError("Authorization was cancelled")
