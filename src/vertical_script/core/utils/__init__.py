"""Serialization and role dictionary helpers."""

from .serialization import (
    CURRENT_VERSION,
    DocumentFileError,
    load_document,
    save_document,
    serialize_document,
    deserialize_document,
)
from .roles import collect_roles, normalize_color, build_role_dictionary

__all__ = [
    "CURRENT_VERSION",
    "DocumentFileError",
    "load_document",
    "save_document",
    "serialize_document",
    "deserialize_document",
    "collect_roles",
    "normalize_color",
    "build_role_dictionary",
]
