"""Single-object operations: get, create, update, delete."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Optional

from gdriveclient.auth import DriveSession
from gdriveclient.errors import (
    GDriveClientError,
    InvalidParentError,
    LocalFileNotFoundError,
    NotFoundError,
)
from gdriveclient.models import DeleteResult, LookupResult, ObjectRecord
from gdriveclient.util.mime import FOLDER_MIME, guess_mime_type

from .permissions import PermissionService
from .query import QueryEngine
from .transfer import ProgressCallback, TransferEngine

logger = logging.getLogger(__name__)


class ObjectService:
    """
    Create/update/delete/get for individual Drive objects.

    Wires its collaborators for the given session: a TransferEngine for
    content, a QueryEngine for folder listings and a PermissionService for
    the public-link toggle.
    """

    def __init__(
        self,
        session: DriveSession,
        *,
        transfer: Optional[TransferEngine] = None,
    ) -> None:
        self._session = session
        self.transfer = transfer or TransferEngine(session)
        self.query = QueryEngine(session, self)
        self.permissions = PermissionService(session, self)

    # ----------------------------
    # Reads
    # ----------------------------
    async def lookup(self, file_id: str) -> LookupResult:
        """
        Fetch one object, distinguishing absence from failure.

        Returns:
            LookupResult with status "found", "not_found" (HTTP 404) or
            "failed" (any other error, kept in `error`).
        """
        controller = self._session.controller
        try:
            record = await asyncio.to_thread(controller.get, file_id)
        except NotFoundError as exc:
            return LookupResult(status="not_found", error=exc)
        except GDriveClientError as exc:
            return LookupResult(status="failed", error=exc)
        return LookupResult(status="found", record=record)

    async def get_by_id(self, file_id: str) -> ObjectRecord:
        """
        Fetch one object, or the not-found sentinel.

        Absence and request failure both yield the sentinel; use `lookup()`
        to tell them apart.
        """
        result = await self.lookup(file_id)
        if result.status == "failed":
            logger.warning(f"Lookup of {file_id} failed: {result.error}")
        return result.record

    # ----------------------------
    # Mutations
    # ----------------------------
    async def create_file(
        self,
        local_path: str,
        parent_id: Optional[str] = None,
        make_public: bool = False,
        *,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """
        Upload local_path as a new object and return its id.

        Raises:
            LocalFileNotFoundError: if local_path is not an existing file.
            InvalidParentError: if parent_id does not resolve to a folder.
            TransportError: if a Drive request fails.
        """
        _require_local_file(local_path)
        name = os.path.basename(local_path)
        mime_type = guess_mime_type(name)

        body: dict[str, Any] = {"name": name, "mimeType": mime_type}
        if parent_id is not None:
            await self._require_folder_parent(parent_id)
            body["parents"] = [parent_id]

        record = await self.transfer.upload_new(local_path, body, mime_type, progress)
        logger.info(f"Created file {record.id} ({name})")

        if make_public:
            await self.permissions.share_link_toggle(record.id, True)
        return record.id

    async def update_file(
        self,
        local_path: str,
        file_id: str,
        *,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """
        Replace the content, name and content type of file_id with local_path.

        Parents are left unchanged.
        """
        _require_local_file(local_path)
        name = os.path.basename(local_path)
        mime_type = guess_mime_type(name)

        body = {"name": name, "mimeType": mime_type}
        await self.transfer.upload_replace(file_id, local_path, body, mime_type, progress)
        logger.info(f"Updated file {file_id} ({name})")
        return file_id

    async def create_folder(
        self,
        name: str,
        parent_id: Optional[str] = None,
        make_public: bool = False,
    ) -> str:
        body: dict[str, Any] = {"name": name, "mimeType": FOLDER_MIME}
        if parent_id is not None:
            await self._require_folder_parent(parent_id)
            body["parents"] = [parent_id]

        controller = self._session.controller
        record = await asyncio.to_thread(controller.create, body)
        logger.info(f"Created folder {record.id} ({name})")

        if make_public:
            await self.permissions.share_link_toggle(record.id, True)
        return record.id

    async def delete(self, file_id: str) -> DeleteResult:
        """Permanently delete an object, reporting the outcome as a DeleteResult."""
        controller = self._session.controller
        try:
            await asyncio.to_thread(controller.delete, file_id)
        except NotFoundError as exc:
            return DeleteResult(file_id=file_id, status="not_found", error=exc)
        except GDriveClientError as exc:
            return DeleteResult(file_id=file_id, status="failed", error=exc)
        logger.info(f"Deleted {file_id}")
        return DeleteResult(file_id=file_id, status="deleted")

    async def delete_file(self, file_id: str) -> bool:
        """Permanently delete an object. Never raises; False on any failure."""
        result = await self.delete(file_id)
        if result.status == "failed":
            logger.warning(f"Delete of {file_id} failed: {result.error}")
        return result.ok

    async def delete_empty_folder(self, folder_id: str) -> bool:
        """
        Delete folder_id only if it has no children (trashed ones included).

        Returns:
            True if the folder was deleted, False if it is not empty or the
            delete failed.

        Raises:
            NotAFolderError: if folder_id is not a folder.
        """
        children = await self.query.list_children(folder_id, include_trashed=True)
        if children:
            logger.debug(f"Folder {folder_id} has {len(children)} children; not deleting")
            return False
        return await self.delete_file(folder_id)

    async def download_file(
        self,
        file_id: str,
        destination_path: str,
        *,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        await self.transfer.download(file_id, destination_path, progress)

    # ----------------------------
    # Internals
    # ----------------------------
    async def _require_folder_parent(self, parent_id: str) -> None:
        result = await self.lookup(parent_id)
        if result.status == "failed" and result.error is not None:
            raise result.error
        if not result.record.is_folder:
            raise InvalidParentError(
                "No folder was found to put into",
                details={"parent_id": parent_id, "status": result.status},
            )


def _require_local_file(local_path: str) -> None:
    if not local_path or not os.path.isfile(local_path):
        raise LocalFileNotFoundError(
            "Local file not found",
            details={"local_path": local_path},
        )
