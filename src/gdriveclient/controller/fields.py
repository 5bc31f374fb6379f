"""Field definitions for Google Drive API responses."""

from __future__ import annotations

PERMISSION_FIELDS: str = "id,type,role,emailAddress,domain,allowFileDiscovery"

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "parents,"
    "shared,"
    "webViewLink,"
    f"permissions({PERMISSION_FIELDS})"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"
