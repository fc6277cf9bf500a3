"""
Module: layout.geometry

Purpose:
    Pure arithmetic turning physical LayoutSettings into character
    capacities: how many columns fit across a page and how many body
    characters fit down one column.

Key Functions:
    - compute_geometry(): Derive LayoutGeometry from settings

Key Classes:
    - ContentRect: Page area inside the margins
    - LayoutGeometry: Capacities for one pass

Dependencies:
    - layout.config: LayoutSettings

Used By:
    - layout.composer: Column capacity and wrap width
    - output.renderer: Glyph placement
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import LayoutSettings


@dataclass(frozen=True)
class ContentRect:
    """Page area inside the margins, measured from the page's top-left corner."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class LayoutGeometry:
    """
    Capacities derived from LayoutSettings (immutable).

    Attributes:
        content_rect: Area inside the margins
        columns_per_page: Columns that fit across the content width (>= 1)
        body_chars_per_column: Body characters per column below the
            role label band (>= 1)
        role_chars_per_column: Role label characters that fit in the band (>= 1)
    """

    content_rect: ContentRect
    columns_per_page: int
    body_chars_per_column: int
    role_chars_per_column: int


def _capacity(length: float, advance: float) -> int:
    """floor(length / advance) clamped to a minimum of 1."""
    if advance <= 0 or not math.isfinite(length) or length <= 0:
        return 1
    return max(1, math.floor(length / advance))


def compute_geometry(settings: LayoutSettings) -> LayoutGeometry:
    """
    Compute page capacities from settings.

    Never raises: margins larger than the page give an empty content
    rect, and every capacity clamps to 1.

    Args:
        settings: Layout settings for this pass

    Returns:
        LayoutGeometry with clamped capacities

    Example:
        >>> g = compute_geometry(LayoutSettings(page_width=100, page_height=100,
        ...     margin_left=0, margin_right=0, margin_top=0, margin_bottom=0,
        ...     column_advance=10, role_label_chars=2))
        >>> g.columns_per_page, g.body_chars_per_column
        (10, 8)
    """
    content_width = max(0.0, settings.page_width - settings.margin_left - settings.margin_right)
    content_height = max(0.0, settings.page_height - settings.margin_top - settings.margin_bottom)
    rect = ContentRect(
        left=settings.margin_left,
        top=settings.margin_top,
        width=content_width,
        height=content_height,
    )

    advance = settings.effective_column_advance
    band = settings.role_label_band_height

    return LayoutGeometry(
        content_rect=rect,
        columns_per_page=_capacity(content_width, advance),
        body_chars_per_column=_capacity(content_height - band, advance),
        role_chars_per_column=_capacity(band, advance),
    )
