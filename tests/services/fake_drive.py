"""In-memory stand-in for GoogleDriveController used by service tests."""

from __future__ import annotations

import re
from typing import Any, Optional

from googleapiclient.http import MediaDownloadProgress, MediaUploadProgress

from gdriveclient.controller.drive_controller import file_dict_to_record
from gdriveclient.errors import NotFoundError
from gdriveclient.models import ObjectRecord
from gdriveclient.util.mime import FOLDER_MIME

_PARENT_Q = re.compile(r"^\(?'(?P<id>[^']+)' in parents\)?(?P<rest>.*)$")
_CONTAINS_Q = re.compile(r"^(?P<field>\w+) contains '(?P<term>.*)'$")


class FakeUploadRequest:
    """Consumes a MediaIoBaseUpload chunk by chunk, like a resumable request."""

    def __init__(self, drive: FakeDrive, body: dict[str, Any], media: Any,
                 file_id: Optional[str] = None) -> None:
        self.drive = drive
        self.body = body
        self.media = media
        self.file_id = file_id
        self.sent = 0
        self.buffer = bytearray()

    def next_chunk(self):
        total = self.media.size()
        if self.sent < total:
            length = min(self.media.chunksize(), total - self.sent)
            data = self.media.getbytes(self.sent, length)
            self.buffer.extend(data)
            self.sent += len(data)
            if self.sent < total:
                return MediaUploadProgress(self.sent, total), None
        return None, self.drive.commit_upload(self.file_id, self.body, bytes(self.buffer))


class FakeMediaRequest:
    def __init__(self, content: Optional[bytes], error: Optional[Exception] = None) -> None:
        self.content = content or b""
        self.error = error


class FakeDownloader:
    """Patched in place of googleapiclient.http.MediaIoBaseDownload."""

    def __init__(self, fd, request: FakeMediaRequest, chunksize: int = 1024) -> None:
        self.fd = fd
        self.request = request
        self.chunksize = chunksize
        self.offset = 0

    def next_chunk(self):
        if self.request.error is not None:
            raise self.request.error
        content = self.request.content
        data = content[self.offset:self.offset + self.chunksize]
        self.fd.write(data)
        self.offset += len(data)
        done = self.offset >= len(content)
        return MediaDownloadProgress(self.offset, len(content)), done


class FakeDrive:
    def __init__(self, *, page_size: int = 100) -> None:
        self.files: dict[str, dict[str, Any]] = {}
        self.contents: dict[str, bytes] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.page_size = page_size
        self.fail_on: dict[str, Exception] = {}
        self._seq = 0

    # ----------------------------
    # Test helpers
    # ----------------------------
    def add(self, name: str, mime_type: str = "text/plain", parents: tuple[str, ...] = (),
            content: bytes = b"", trashed: bool = False) -> str:
        file_id = self._new_id()
        self.files[file_id] = {
            "id": file_id,
            "name": name,
            "mimeType": mime_type,
            "parents": list(parents),
            "shared": False,
            "webViewLink": f"https://drive.google.com/file/d/{file_id}/view",
            "permissions": [{"id": "owner", "type": "user", "role": "owner"}],
            "trashed": trashed,
        }
        self.contents[file_id] = content
        return file_id

    def add_folder(self, name: str, parents: tuple[str, ...] = ()) -> str:
        return self.add(name, FOLDER_MIME, parents)

    def _new_id(self) -> str:
        self._seq += 1
        return f"F{self._seq}"

    def _check(self, op: str) -> None:
        if op in self.fail_on:
            raise self.fail_on[op]

    def _require(self, file_id: str) -> dict[str, Any]:
        if file_id not in self.files:
            raise NotFoundError("not found", details={"file_id": file_id})
        return self.files[file_id]

    # ----------------------------
    # Controller interface
    # ----------------------------
    def execute(self, func):
        return func()

    def get(self, file_id: str) -> ObjectRecord:
        self.calls.append(("get", file_id))
        self._check("get")
        return file_dict_to_record(self._require(file_id))

    def create(self, body: dict[str, Any]) -> ObjectRecord:
        self.calls.append(("create", body))
        self._check("create")
        file_id = self.add(body["name"], body.get("mimeType", ""), tuple(body.get("parents", [])))
        return file_dict_to_record(self.files[file_id])

    def delete(self, file_id: str) -> None:
        self.calls.append(("delete", file_id))
        self._check("delete")
        self._require(file_id)
        del self.files[file_id]
        self.contents.pop(file_id, None)

    def list_page(self, q: str, *, page_token: Optional[str] = None,
                  spaces: str = "drive") -> tuple[list[ObjectRecord], Optional[str]]:
        self.calls.append(("list_page", q, page_token, spaces))
        self._check("list_page")
        matches = [f for f in self.files.values() if self._matches(q, f)]
        start = int(page_token) if page_token else 0
        end = start + self.page_size
        page = [file_dict_to_record(f) for f in matches[start:end]]
        return page, str(end) if end < len(matches) else None

    def _matches(self, q: str, data: dict[str, Any]) -> bool:
        m = _PARENT_Q.match(q)
        if m:
            if m.group("id") not in data["parents"]:
                return False
            return "trashed=false" not in m.group("rest") or not data["trashed"]
        m = _CONTAINS_Q.match(q)
        if m:
            term = m.group("term").replace("\\'", "'").replace("\\\\", "\\")
            return term in str(data.get(m.group("field"), ""))
        raise AssertionError(f"unsupported query: {q}")

    def create_media_request(self, body: dict[str, Any], media: Any) -> FakeUploadRequest:
        self.calls.append(("create_media", body))
        return FakeUploadRequest(self, body, media)

    def update_media_request(self, file_id: str, body: dict[str, Any],
                             media: Any) -> FakeUploadRequest:
        self.calls.append(("update_media", file_id, body))
        return FakeUploadRequest(self, body, media, file_id=file_id)

    def commit_upload(self, file_id: Optional[str], body: dict[str, Any],
                      content: bytes) -> dict[str, Any]:
        self._check("upload")
        if file_id is None:
            file_id = self.add(body["name"], body["mimeType"], tuple(body.get("parents", [])))
        else:
            data = self._require(file_id)
            data["name"] = body["name"]
            data["mimeType"] = body["mimeType"]
        self.contents[file_id] = content
        return dict(self.files[file_id])

    def get_media_request(self, file_id: str) -> FakeMediaRequest:
        self.calls.append(("get_media", file_id))
        if file_id not in self.files:
            return FakeMediaRequest(None, NotFoundError("not found"))
        return FakeMediaRequest(self.contents[file_id], self.fail_on.get("download"))

    def create_permission(self, file_id: str, body: dict[str, Any]):
        self.calls.append(("create_permission", file_id, body))
        self._check("create_permission")
        data = self._require(file_id)
        data["permissions"].append({"id": "anyoneWithLink", **body})
        data["shared"] = True

    def delete_permission(self, file_id: str, permission_id: str) -> None:
        self.calls.append(("delete_permission", file_id, permission_id))
        data = self._require(file_id)
        remaining = [p for p in data["permissions"] if p["id"] != permission_id]
        if len(remaining) == len(data["permissions"]):
            raise NotFoundError("permission not found", details={"permission_id": permission_id})
        data["permissions"] = remaining
        data["shared"] = any(p["type"] != "user" for p in remaining)
