"""Paginated listing and metadata search."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, AsyncIterator, Optional

from gdriveclient.auth import DriveSession
from gdriveclient.errors import InvalidArgumentError, NotAFolderError
from gdriveclient.models import ObjectRecord
from gdriveclient.util.query import build_contains_query, build_parent_query

if TYPE_CHECKING:
    from .objects import ObjectService

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Runs Drive queries, following continuation tokens page by page.

    Records keep the backend's order; nothing is re-sorted or deduplicated.
    A failure on any page aborts the whole query.
    """

    def __init__(self, session: DriveSession, objects: ObjectService) -> None:
        self._session = session
        self._objects = objects

    async def list_children(
        self,
        folder_id: str,
        *,
        include_trashed: bool = True,
    ) -> list[ObjectRecord]:
        """
        Return every child of folder_id, trashed ones included unless
        include_trashed is False.

        Raises:
            NotAFolderError: if folder_id is missing or not a folder.
            TransportError: if a Drive request fails.
        """
        return [r async for r in self.iter_children(folder_id, include_trashed=include_trashed)]

    async def search(self, term: str, field: str = "name") -> list[ObjectRecord]:
        """Return every object whose `field` contains `term`."""
        return [r async for r in self.iter_search(term, field)]

    async def iter_children(
        self,
        folder_id: str,
        *,
        include_trashed: bool = True,
        page_token: Optional[str] = None,
    ) -> AsyncIterator[ObjectRecord]:
        await self._require_folder(folder_id)
        q = build_parent_query(folder_id, include_trashed=include_trashed)
        async for record in self.iter_query(q, page_token=page_token):
            yield record

    async def iter_search(
        self,
        term: str,
        field: str = "name",
        *,
        page_token: Optional[str] = None,
    ) -> AsyncIterator[ObjectRecord]:
        if not isinstance(field, str) or not field.strip():
            raise InvalidArgumentError("field must be a non-empty string")
        q = build_contains_query(field.strip(), term)
        async for record in self.iter_query(q, page_token=page_token):
            yield record

    async def iter_query(
        self,
        q: str,
        *,
        page_token: Optional[str] = None,
    ) -> AsyncIterator[ObjectRecord]:
        """
        Yield the records of a raw `q` query lazily, one page at a time.

        The next page is only requested once the current one is consumed.
        Pass a previously returned continuation token as `page_token` to
        restart mid-way.
        """
        controller = self._session.controller
        spaces = self._session.config.spaces
        pages = 0

        while True:
            records, page_token = await asyncio.to_thread(
                controller.list_page,
                q,
                page_token=page_token,
                spaces=spaces,
            )
            pages += 1
            logger.debug(f"Query page {pages}: {len(records)} records (q={q!r})")
            for record in records:
                yield record
            if page_token is None:
                break

    async def _require_folder(self, folder_id: str) -> None:
        result = await self._objects.lookup(folder_id)
        if result.status == "failed" and result.error is not None:
            raise result.error
        if not result.record.is_folder:
            raise NotAFolderError(
                "ID is not a folder type",
                details={"folder_id": folder_id, "status": result.status},
            )
