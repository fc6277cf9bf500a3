"""
Serialization Utilities

Reads and writes the versioned document container::

    {"version": 1, "document": {"records": [...], ...}}

- ``serialize_*`` / ``deserialize_*`` convert between models and dicts
- ``load_document`` / ``save_document`` handle the file on disk
- Payloads are validated against the document schema before use
- Loaded documents are always normalized (never an empty record list)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.records import DocumentState
from ..schemas.validator import (
    DOCUMENT_SCHEMA_VERSION,
    DocumentFileError,
    canonicalize_keys,
    validate_document_file,
)

logger = logging.getLogger(__name__)

CURRENT_VERSION = DOCUMENT_SCHEMA_VERSION


def serialize_document(document: DocumentState) -> dict[str, Any]:
    """
    Wrap a document in the versioned file container.

    The current version is always stamped, whatever was loaded.
    """
    return {
        "version": CURRENT_VERSION,
        "document": document.to_dict(),
    }


def deserialize_document(data: Any) -> DocumentState:
    """
    Unwrap a document from the versioned file container.

    Args:
        data: Parsed JSON payload

    Returns:
        Normalized DocumentState; the default document when the payload
        carries no document

    Raises:
        DocumentFileError: If the payload is not an object or has an
            unsupported version
        ValidationError: If the payload does not match the schema
    """
    if not isinstance(data, dict):
        raise DocumentFileError("Invalid file contents.")

    payload = canonicalize_keys(data)
    # Files written without a version are read as the current version
    payload.setdefault("version", CURRENT_VERSION)
    version = payload["version"]
    if isinstance(version, int) and not isinstance(version, bool) and version != CURRENT_VERSION:
        raise DocumentFileError(f"Unsupported file version: {version}.")

    validate_document_file(payload)

    document = payload.get("document")
    if document is None:
        return DocumentState.create_default()
    return DocumentState.from_dict(document)


def load_document(path: Path) -> DocumentState:
    """
    Load a document file from disk.

    Args:
        path: Path to the document file

    Returns:
        Normalized DocumentState

    Raises:
        DocumentFileError: If the file cannot be read, is not JSON, or
            fails version/schema checks
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise DocumentFileError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentFileError(f"Invalid file contents: not UTF-8 text ({e.reason})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentFileError(f"Invalid file contents: {e}") from e

    document = deserialize_document(data)
    logger.info(f"Loaded {len(document.records)} records from {path}")
    return document


def save_document(path: Path, document: DocumentState) -> None:
    """
    Write a document file to disk as indented UTF-8 JSON.

    Raises:
        DocumentFileError: If the file cannot be written
    """
    path = Path(path)
    payload = serialize_document(document)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as e:
        raise DocumentFileError(f"Failed to write {path}: {e}") from e

    logger.info(f"Saved {len(document.records)} records to {path}")
