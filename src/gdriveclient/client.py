"""GoogleDrive: one-stop client over a DriveSession and its services."""

from __future__ import annotations

from typing import AsyncIterator, Optional

from gdriveclient.auth import DriveSession
from gdriveclient.config import ClientConfig
from gdriveclient.controller import GoogleDriveController
from gdriveclient.models import DeleteResult, LookupResult, ObjectRecord
from gdriveclient.services import ObjectService, ProgressCallback


class GoogleDrive:
    """
    High-level Drive client.

    Usage:
        drive = await GoogleDrive.create("my-app", "client_secret.json")
        drive.progress_callback_create = lambda pct: print(f"{pct:.0f}%")
        file_id = await drive.create_file("report.pdf", folder_id, make_public=True)

    Attributes:
        progress_callback_create: Called with 0-100 while create_file uploads.
        progress_callback_update: Called with 0-100 while update_file uploads.
    """

    def __init__(self, session: DriveSession) -> None:
        self._session = session
        self._objects = ObjectService(session)
        self.progress_callback_create: Optional[ProgressCallback] = None
        self.progress_callback_update: Optional[ProgressCallback] = None

    @classmethod
    async def create(
        cls,
        application_name: str,
        client_secrets_file: str,
        *,
        config: Optional[ClientConfig] = None,
    ) -> GoogleDrive:
        """
        Authenticate and return a ready client.

        Raises:
            AuthTimeoutError: if authorization does not complete in time.
            AuthError: on other authorization failures.
        """
        session = await DriveSession.create(
            application_name,
            client_secrets_file,
            config=config,
        )
        return cls(session)

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        *,
        config: Optional[ClientConfig] = None,
    ) -> GoogleDrive:
        """Create a client around an injected controller (useful for tests)."""
        return cls(DriveSession.from_controller(controller, config=config))

    @property
    def session(self) -> DriveSession:
        return self._session

    async def reauthenticate(self) -> None:
        """Delete the credential cache and authorize again."""
        await self._session.reauthenticate()

    # ----------------------------
    # Objects
    # ----------------------------
    async def get_file_by_id(self, file_id: str) -> ObjectRecord:
        return await self._objects.get_by_id(file_id)

    async def lookup(self, file_id: str) -> LookupResult:
        return await self._objects.lookup(file_id)

    async def create_file(
        self,
        local_path: str,
        folder_id: Optional[str] = None,
        make_public: bool = False,
    ) -> str:
        return await self._objects.create_file(
            local_path,
            folder_id,
            make_public,
            progress=self.progress_callback_create,
        )

    async def update_file(self, local_path: str, file_id: str) -> str:
        return await self._objects.update_file(
            local_path,
            file_id,
            progress=self.progress_callback_update,
        )

    async def create_folder(
        self,
        name: str,
        folder_id: Optional[str] = None,
        make_public: bool = False,
    ) -> str:
        return await self._objects.create_folder(name, folder_id, make_public)

    async def delete_file(self, file_id: str) -> bool:
        return await self._objects.delete_file(file_id)

    async def delete(self, file_id: str) -> DeleteResult:
        return await self._objects.delete(file_id)

    async def delete_empty_folder(self, folder_id: str) -> bool:
        return await self._objects.delete_empty_folder(folder_id)

    async def download_file(
        self,
        file_id: str,
        destination_path: str,
        *,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        await self._objects.download_file(file_id, destination_path, progress=progress)

    # ----------------------------
    # Queries
    # ----------------------------
    async def list_children(self, folder_id: str) -> list[ObjectRecord]:
        return await self._objects.query.list_children(folder_id)

    def iter_children(
        self,
        folder_id: str,
        *,
        page_token: Optional[str] = None,
    ) -> AsyncIterator[ObjectRecord]:
        return self._objects.query.iter_children(folder_id, page_token=page_token)

    async def search(self, term: str, field: str = "name") -> list[ObjectRecord]:
        return await self._objects.query.search(term, field)

    def iter_search(
        self,
        term: str,
        field: str = "name",
        *,
        page_token: Optional[str] = None,
    ) -> AsyncIterator[ObjectRecord]:
        return self._objects.query.iter_search(term, field, page_token=page_token)

    # ----------------------------
    # Permissions
    # ----------------------------
    async def share_link_toggle(self, file_id: str, on: bool) -> ObjectRecord:
        return await self._objects.permissions.share_link_toggle(file_id, on)
