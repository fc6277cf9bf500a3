"""JSON Schema validation for the document file format."""

from .validator import (
    DOCUMENT_SCHEMA_VERSION,
    DocumentFileError,
    ValidationError,
    validate_document_file,
)

__all__ = [
    "DOCUMENT_SCHEMA_VERSION",
    "DocumentFileError",
    "ValidationError",
    "validate_document_file",
]
