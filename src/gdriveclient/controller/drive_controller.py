"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

from gdriveclient.errors import (
    ApiError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from gdriveclient.models import ObjectRecord, PermissionEntry

from .fields import FILE_FIELDS, LIST_FIELDS

T = TypeVar("T")

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Every call is synchronous and blocking. Errors are mapped to
    gdriveclient exceptions; nothing is retried.

    Notes:
        - `supports_all_drives` is applied to all requests consistently.
        - Upload/download requests are returned unexecuted so the caller can
          drive them chunk by chunk.
    """

    def __init__(
        self,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> None:
        self._service = service
        self._supports_all_drives = supports_all_drives

    # ----------------------------
    # Metadata
    # ----------------------------
    def get(self, file_id: str) -> ObjectRecord:
        data = self.execute(
            lambda: self._service.files().get(
                fileId=file_id,
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            ).execute()
        )
        return file_dict_to_record(data)

    def create(self, body: dict[str, Any]) -> ObjectRecord:
        data = self.execute(
            lambda: self._service.files().create(
                body=body,
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            ).execute()
        )
        return file_dict_to_record(data)

    def delete(self, file_id: str) -> None:
        self.execute(
            lambda: self._service.files().delete(
                fileId=file_id,
                **self._common_kwargs(),
            ).execute()
        )

    def list_page(
        self,
        q: str,
        *,
        page_token: Optional[str] = None,
        spaces: str = "drive",
    ) -> tuple[list[ObjectRecord], Optional[str]]:
        """Fetch one page of a files.list query. Returns (records, next_page_token)."""
        data = self.execute(
            lambda: self._service.files().list(
                q=q,
                spaces=spaces,
                fields=LIST_FIELDS,
                pageToken=page_token,
                **self._common_list_kwargs(),
            ).execute()
        )
        records = [file_dict_to_record(f) for f in data.get("files", []) or []]
        next_token = data.get("nextPageToken")
        return records, next_token if isinstance(next_token, str) and next_token else None

    # ----------------------------
    # Content
    # ----------------------------
    def create_media_request(self, body: dict[str, Any], media: Any) -> Any:
        return self.execute(
            lambda: self._service.files().create(
                body=body,
                media_body=media,
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            )
        )

    def update_media_request(self, file_id: str, body: dict[str, Any], media: Any) -> Any:
        return self.execute(
            lambda: self._service.files().update(
                fileId=file_id,
                body=body,
                media_body=media,
                fields=FILE_FIELDS,
                **self._common_kwargs(),
            )
        )

    def get_media_request(self, file_id: str) -> Any:
        return self.execute(
            lambda: self._service.files().get_media(
                fileId=file_id,
                **self._common_kwargs(),
            )
        )

    # ----------------------------
    # Permissions
    # ----------------------------
    def create_permission(self, file_id: str, body: dict[str, Any]) -> PermissionEntry:
        data = self.execute(
            lambda: self._service.permissions().create(
                fileId=file_id,
                body=body,
                fields="id,type,role",
                **self._common_kwargs(),
            ).execute()
        )
        return _permission_dict_to_entry(data)

    def delete_permission(self, file_id: str, permission_id: str) -> None:
        self.execute(
            lambda: self._service.permissions().delete(
                fileId=file_id,
                permissionId=permission_id,
                **self._common_kwargs(),
            ).execute()
        )

    # ----------------------------
    # Error mapping
    # ----------------------------
    def execute(self, func: Callable[[], T]) -> T:
        """
        Run one Drive call, mapping any failure to a gdriveclient error.

        `func` should build the request as well as execute it, so client-side
        argument errors are mapped too.
        """
        try:
            return func()
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            logger.debug(f"Drive request failed: HTTP {info.status_code} {info.reason}")
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)

    def _common_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}


def file_dict_to_record(data: dict[str, Any]) -> ObjectRecord:
    file_id = data.get("id")
    name = data.get("name")
    mime_type = data.get("mimeType")
    parents = data.get("parents") or []
    link = data.get("webViewLink")
    permissions = data.get("permissions") or []

    return ObjectRecord(
        id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=[p for p in parents if isinstance(p, str)] if isinstance(parents, list) else [],
        is_shared=data.get("shared") is True,
        link=link if isinstance(link, str) else "",
        permissions=[
            _permission_dict_to_entry(p) for p in permissions if isinstance(p, dict)
        ] if isinstance(permissions, list) else [],
        found=True,
    )


def _permission_dict_to_entry(data: dict[str, Any]) -> PermissionEntry:
    def _str(key: str) -> str:
        value = data.get(key)
        return value if isinstance(value, str) else ""

    return PermissionEntry(
        id=_str("id"),
        type=_str("type"),
        role=_str("role"),
        email_address=_str("emailAddress"),
        domain=_str("domain"),
        allow_file_discovery=data.get("allowFileDiscovery") is True,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = {}
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
