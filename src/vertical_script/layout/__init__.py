"""
Module: layout

Purpose:
    Vertical text pagination engine.
    Converts ordered (role, body) records into pages of right-to-left
    columns and flags records that cannot fit on one page.

Key Functions:
    - compose(): Main entry point for layout
    - compute_geometry(): Page capacities from settings
    - wrap_columns(): Split a body into columns

Key Classes:
    - LayoutSettings: Physical page settings
    - LayoutGeometry: Derived capacities
    - RecordPlacement / PageLayout / DocumentLayout: Layout output

Used By:
    - controller.EditorSession
    - output.renderer
"""

from .config import LayoutSettings, mm_to_pt, pt_to_mm, dip_to_pt
from .geometry import ContentRect, LayoutGeometry, compute_geometry
from .wrapper import wrap_columns
from .models import RecordPlacement, PageLayout, DocumentLayout
from .composer import compose, compose_document

__all__ = [
    # Config
    "LayoutSettings",
    "mm_to_pt",
    "pt_to_mm",
    "dip_to_pt",
    # Geometry
    "ContentRect",
    "LayoutGeometry",
    "compute_geometry",
    # Wrapping
    "wrap_columns",
    # Models
    "RecordPlacement",
    "PageLayout",
    "DocumentLayout",
    # Functions
    "compose",
    "compose_document",
]
