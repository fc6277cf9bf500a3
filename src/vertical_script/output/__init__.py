"""
Module: output

Purpose:
    Finalize output: PDF export of a composed layout, gated on the
    absence of overflow.
"""

from .renderer import (
    ExportError,
    UnresolvedOverflowError,
    ensure_exportable,
    render_to_pdf,
)

__all__ = [
    "ExportError",
    "UnresolvedOverflowError",
    "ensure_exportable",
    "render_to_pdf",
]
