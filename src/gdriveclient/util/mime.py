from __future__ import annotations

import mimetypes
import os

FOLDER_MIME: str = "application/vnd.google-apps.folder"

# Used when the extension is unknown to the registry.
DEFAULT_MIME: str = "application/octet-stream"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def guess_mime_type(path: str) -> str:
    """
    Return the MIME type for a file name, based on its extension only.

    The file content is never inspected.
    """
    mime_type, _ = mimetypes.guess_type(os.path.basename(path), strict=False)
    return mime_type or DEFAULT_MIME
