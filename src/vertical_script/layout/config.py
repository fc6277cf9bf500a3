"""
Module: layout.config

Purpose:
    Physical layout settings for the pagination engine.
    Page size, margins, character cell size and spacing, all in
    PostScript points (1/72 inch).

Key Classes:
    - LayoutSettings: Immutable per-pass layout settings

Key Functions:
    - mm_to_pt(), pt_to_mm(), dip_to_pt(): Unit conversion

Dependencies:
    - dataclasses (std)

Used By:
    - layout.geometry: Capacity arithmetic
    - layout.composer: Page composition
    - output.renderer: PDF export
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4
DIP_PER_INCH = 96.0

# A4 landscape, the editor's only page format
DEFAULT_PAGE_WIDTH_MM = 297.0
DEFAULT_PAGE_HEIGHT_MM = 210.0
DEFAULT_MARGIN_LEFT_MM = 20.0
DEFAULT_MARGIN_RIGHT_MM = 20.0
DEFAULT_MARGIN_TOP_MM = 25.0
DEFAULT_MARGIN_BOTTOM_MM = 25.0

DEFAULT_FONT_SIZE_PT = 10.5
DEFAULT_LINE_SPACING = 1.0
DEFAULT_ROLE_LABEL_CHARS = 5.5
DEFAULT_RECORD_GAP_CHARS = 1.0
DEFAULT_PAGE_GAP_DIP = 24.0


def mm_to_pt(mm: float) -> float:
    """Convert millimetres to points."""
    return mm / MM_PER_INCH * POINTS_PER_INCH


def pt_to_mm(pt: float) -> float:
    """Convert points to millimetres."""
    return pt / POINTS_PER_INCH * MM_PER_INCH


def dip_to_pt(dip: float) -> float:
    """Convert device-independent pixels (1/96 inch) to points."""
    return dip / DIP_PER_INCH * POINTS_PER_INCH


def _non_negative(value: float) -> float:
    """Clamp NaN, infinities and negatives to zero."""
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class LayoutSettings:
    """
    Layout settings for one pagination pass (immutable).

    Every field is a physical length in points except the two ``*_chars``
    fields, which count square character cells. Malformed values are never
    rejected: the ``effective_*`` properties clamp them so that geometry
    always yields capacities of at least one.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_left: Left margin
        margin_right: Right margin
        margin_top: Top margin
        margin_bottom: Bottom margin
        column_advance: Side length of one square character cell
        role_label_chars: Height of the role label band, in cells
        record_gap_chars: Blank columns between consecutive records
        page_gap: Vertical gap between pages on the editing canvas
        font_size: Glyph size used when drawing

    Example:
        >>> settings = LayoutSettings()
        >>> round(settings.column_advance, 2)
        10.5
        >>> round(settings.role_label_band_height, 2)
        57.75
    """

    # Page dimensions
    page_width: float = mm_to_pt(DEFAULT_PAGE_WIDTH_MM)
    page_height: float = mm_to_pt(DEFAULT_PAGE_HEIGHT_MM)

    # Margins
    margin_left: float = mm_to_pt(DEFAULT_MARGIN_LEFT_MM)
    margin_right: float = mm_to_pt(DEFAULT_MARGIN_RIGHT_MM)
    margin_top: float = mm_to_pt(DEFAULT_MARGIN_TOP_MM)
    margin_bottom: float = mm_to_pt(DEFAULT_MARGIN_BOTTOM_MM)

    # Character grid
    column_advance: float = DEFAULT_FONT_SIZE_PT * DEFAULT_LINE_SPACING
    role_label_chars: float = DEFAULT_ROLE_LABEL_CHARS
    record_gap_chars: float = DEFAULT_RECORD_GAP_CHARS

    # Canvas
    page_gap: float = dip_to_pt(DEFAULT_PAGE_GAP_DIP)

    font_size: float = DEFAULT_FONT_SIZE_PT

    @classmethod
    def from_physical(
        cls,
        *,
        page_width_mm: float = DEFAULT_PAGE_WIDTH_MM,
        page_height_mm: float = DEFAULT_PAGE_HEIGHT_MM,
        margin_left_mm: float = DEFAULT_MARGIN_LEFT_MM,
        margin_right_mm: float = DEFAULT_MARGIN_RIGHT_MM,
        margin_top_mm: float = DEFAULT_MARGIN_TOP_MM,
        margin_bottom_mm: float = DEFAULT_MARGIN_BOTTOM_MM,
        font_size_pt: float = DEFAULT_FONT_SIZE_PT,
        line_spacing: float = DEFAULT_LINE_SPACING,
        role_label_chars: float = DEFAULT_ROLE_LABEL_CHARS,
        record_gap_chars: float = DEFAULT_RECORD_GAP_CHARS,
        page_gap_dip: float = DEFAULT_PAGE_GAP_DIP,
    ) -> LayoutSettings:
        """
        Build settings from millimetre page measurements and a font size.

        The column advance is the font size scaled by the line spacing.

        Example:
            >>> s = LayoutSettings.from_physical(font_size_pt=12, line_spacing=1.5)
            >>> s.column_advance
            18.0
        """
        return cls(
            page_width=mm_to_pt(page_width_mm),
            page_height=mm_to_pt(page_height_mm),
            margin_left=mm_to_pt(margin_left_mm),
            margin_right=mm_to_pt(margin_right_mm),
            margin_top=mm_to_pt(margin_top_mm),
            margin_bottom=mm_to_pt(margin_bottom_mm),
            column_advance=font_size_pt * line_spacing,
            role_label_chars=role_label_chars,
            record_gap_chars=record_gap_chars,
            page_gap=dip_to_pt(page_gap_dip),
            font_size=font_size_pt,
        )

    def with_role_label_chars(self, role_label_chars: float) -> LayoutSettings:
        """Return a copy with a different role label band height."""
        return replace(self, role_label_chars=role_label_chars)

    @property
    def effective_column_advance(self) -> float:
        """Column advance, or 0.0 when it is unusable (non-positive or NaN)."""
        return _non_negative(self.column_advance)

    @property
    def role_label_band_height(self) -> float:
        """Physical height of the role label band."""
        return _non_negative(self.role_label_chars) * self.effective_column_advance

    @property
    def record_gap_columns(self) -> int:
        """Blank columns inserted after each record (half-to-even rounding)."""
        return int(round(_non_negative(self.record_gap_chars)))

    @property
    def effective_page_gap(self) -> float:
        """Gap between pages on the canvas, clamped to zero."""
        return _non_negative(self.page_gap)
