"""
Schema Validation Utilities

Validates document file payloads against ``document.schema.json``.

The file reader is case-insensitive about property names, so payloads
are canonicalized (``canonicalize_keys``) before they are validated.
Version checks happen before structural validation: a file from a
future version is reported as unsupported rather than malformed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Current document file version
DOCUMENT_SCHEMA_VERSION = 1

_FILE_KEYS = ("version", "document")
_DOCUMENT_KEYS = ("records", "pageNumberEnabled", "roleDictionary")
_RECORD_KEYS = ("roleName", "body")

_SCHEMAS: dict[str, dict] = {}


class DocumentFileError(Exception):
    """Raised when a document file cannot be read or written."""


class ValidationError(DocumentFileError):
    """Raised when document file data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _canonical(data: dict[str, Any], known: tuple[str, ...]) -> dict[str, Any]:
    """Rename keys matching a known name case-insensitively."""
    lookup = {k.lower(): k for k in known}
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = lookup.get(key.lower(), key) if isinstance(key, str) else key
        # exact spelling wins over a case-insensitive duplicate
        if name in result and key != name:
            continue
        result[name] = value
    return result


def canonicalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of a file payload with property names in canonical case.

    Role dictionary keys are user data and are left untouched.
    """
    payload = _canonical(data, _FILE_KEYS)
    document = payload.get("document")
    if isinstance(document, dict):
        document = _canonical(document, _DOCUMENT_KEYS)
        records = document.get("records")
        if isinstance(records, list):
            document["records"] = [
                _canonical(r, _RECORD_KEYS) if isinstance(r, dict) else r
                for r in records
            ]
        payload["document"] = document
    return payload


def validate_document_file(data: Any) -> None:
    """
    Validate a canonicalized document file payload.

    Args:
        data: Payload as returned by ``canonicalize_keys``

    Raises:
        ValidationError: If the payload does not match the schema
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid file contents.", path="")

    schema = _load_schema("document")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e
