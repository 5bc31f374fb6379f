from .mime import DEFAULT_MIME, FOLDER_MIME, guess_mime_type, is_folder
from .query import build_contains_query, build_parent_query, escape_query_value

__all__ = [
    "FOLDER_MIME",
    "DEFAULT_MIME",
    "is_folder",
    "guess_mime_type",
    "escape_query_value",
    "build_parent_query",
    "build_contains_query",
]
