"""Helpers for the Drive `q` query language."""

from __future__ import annotations


def escape_query_value(value: str) -> str:
    """Escape a value for use inside a single-quoted query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_parent_query(parent_id: str, *, include_trashed: bool) -> str:
    q = f"'{escape_query_value(parent_id)}' in parents"
    if not include_trashed:
        q = f"({q}) and trashed=false"
    return q


def build_contains_query(field: str, term: str) -> str:
    return f"{field} contains '{escape_query_value(term)}'"
