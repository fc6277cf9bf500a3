"""
Core Models Package

The script document as edited: an ordered list of records plus
document-level metadata. Unlike layout models these are mutable and
owned by the editor.
"""

from .records import ScriptRecord, DocumentState

__all__ = [
    "ScriptRecord",
    "DocumentState",
]
