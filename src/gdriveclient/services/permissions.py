"""Public-link sharing control."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from gdriveclient.auth import DriveSession
from gdriveclient.models import ObjectRecord

if TYPE_CHECKING:
    from .objects import ObjectService

logger = logging.getLogger(__name__)

# Drive's fixed id for the "anyone with the link" permission.
ANYONE_WITH_LINK_ID: str = "anyoneWithLink"

PUBLIC_READER: dict[str, str] = {"role": "reader", "type": "anyone"}


class PermissionService:
    def __init__(self, session: DriveSession, objects: ObjectService) -> None:
        self._session = session
        self._objects = objects

    async def share_link_toggle(self, file_id: str, on: bool) -> ObjectRecord:
        """
        Grant (on=True) or revoke (on=False) reader access for anyone with the link.

        Returns:
            The object re-fetched after the change, or the not-found sentinel.

        Raises:
            TransportError: if the permission change fails.
        """
        controller = self._session.controller
        if on:
            await asyncio.to_thread(controller.create_permission, file_id, dict(PUBLIC_READER))
        else:
            await asyncio.to_thread(controller.delete_permission, file_id, ANYONE_WITH_LINK_ID)
        logger.info(f"Public link {'enabled' if on else 'disabled'} for {file_id}")

        return await self._objects.get_by_id(file_id)
