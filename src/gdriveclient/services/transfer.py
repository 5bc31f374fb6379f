"""Chunked (resumable) upload/download with progress reporting."""

from __future__ import annotations

import asyncio
import io
import logging
import os
from typing import Any, Callable, Optional

from gdriveclient.auth import DriveSession
from gdriveclient.controller import GoogleDriveController
from gdriveclient.controller.drive_controller import file_dict_to_record
from gdriveclient.errors import AuthError
from gdriveclient.models import ObjectRecord

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


class TransferEngine:
    """
    Streams file content to and from Drive in chunks.

    Progress callbacks receive a percentage (0-100) after every chunk and run
    on the transfer worker thread. They must not block. No transfer is
    resumed or retried: a failing chunk aborts the whole transfer.
    """

    def __init__(self, session: DriveSession) -> None:
        self._session = session

    async def upload_new(
        self,
        local_path: str,
        body: dict[str, Any],
        mime_type: str,
        progress: Optional[ProgressCallback] = None,
    ) -> ObjectRecord:
        """Create a new object with the content of local_path."""
        controller = self._session.controller
        return await asyncio.to_thread(
            self._upload,
            controller,
            local_path,
            mime_type,
            lambda media: controller.create_media_request(body, media),
            progress,
        )

    async def upload_replace(
        self,
        file_id: str,
        local_path: str,
        body: dict[str, Any],
        mime_type: str,
        progress: Optional[ProgressCallback] = None,
    ) -> ObjectRecord:
        """Replace the content (and metadata in body) of an existing object."""
        controller = self._session.controller
        return await asyncio.to_thread(
            self._upload,
            controller,
            local_path,
            mime_type,
            lambda media: controller.update_media_request(file_id, body, media),
            progress,
        )

    async def download(
        self,
        file_id: str,
        destination_path: str,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        """
        Download an object into memory, then write it to destination_path.

        An existing destination file is overwritten. If the download fails,
        the destination is left untouched.
        """
        controller = self._session.controller
        await asyncio.to_thread(self._download, controller, file_id, destination_path, progress)

    # ----------------------------
    # Internals (worker thread)
    # ----------------------------
    def _upload(
        self,
        controller: GoogleDriveController,
        local_path: str,
        mime_type: str,
        make_request: Callable[[Any], Any],
        progress: Optional[ProgressCallback],
    ) -> ObjectRecord:
        try:
            from googleapiclient.http import MediaIoBaseUpload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        total_size = os.path.getsize(local_path)
        with open(local_path, "rb") as fh:
            media = MediaIoBaseUpload(
                fh,
                mimetype=mime_type,
                chunksize=self._session.config.chunk_size,
                resumable=True,
            )
            request = make_request(media)

            response = None
            while response is None:
                status, response = controller.execute(request.next_chunk)
                if status is not None:
                    sent = status.resumable_progress
                    logger.debug(f"Uploaded {sent}/{total_size} bytes of {local_path}")
                    _report(progress, _fraction(sent, total_size))

        _report(progress, 100.0)
        return file_dict_to_record(response)

    def _download(
        self,
        controller: GoogleDriveController,
        file_id: str,
        destination_path: str,
        progress: Optional[ProgressCallback],
    ) -> None:
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        request = controller.get_media_request(file_id)
        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(
            buffer,
            request,
            chunksize=self._session.config.chunk_size,
        )

        done = False
        while not done:
            status, done = controller.execute(downloader.next_chunk)
            if status is not None:
                _report(progress, status.progress() * 100)

        parent_dir = os.path.dirname(destination_path)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)

        with open(destination_path, "wb") as f:
            f.write(buffer.getvalue())
        logger.debug(f"Downloaded {file_id} to {destination_path}")


def _fraction(done: int, total: int) -> float:
    if total <= 0:
        return 100.0
    return done * 100 / total


def _report(progress: Optional[ProgressCallback], value: float) -> None:
    if progress is None:
        return
    try:
        progress(float(value))
    except Exception:
        logger.warning("Progress callback raised; ignoring", exc_info=True)
