"""
Module: layout.models

Purpose:
    Data models for vertical page layout.
    Immutable dataclasses recomputed on every pass; never kept in sync
    with the document, never persisted.

Key Classes:
    - RecordPlacement: One record's columns positioned on a page
    - PageLayout: Placements on a single page
    - DocumentLayout: Complete layout output

Dependencies:
    - dataclasses (std)
    - core.models.records: ScriptRecord

Used By:
    - layout.composer: Creates the layout
    - attention.status: Layout status feedback
    - output.renderer: PDF export
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from vertical_script.core.models.records import ScriptRecord

from .geometry import LayoutGeometry


@dataclass(frozen=True)
class RecordPlacement:
    """
    A record's wrapped columns positioned on a page.

    Attributes:
        record_index: Position of the record in the document
        record: The record that was placed
        columns: Wrapped body, one string per column
        column_start: First column, counted from the page's right edge
        column_count: Columns occupied, max(1, len(columns))
        overflow: True when column_count exceeds the page's capacity

    Example:
        >>> p = RecordPlacement(0, ScriptRecord("A", "xy"), ("xy",), 2, 1, False)
        >>> p.column_end
        3
    """

    record_index: int
    record: ScriptRecord
    columns: Tuple[str, ...]
    column_start: int
    column_count: int
    overflow: bool

    @property
    def column_end(self) -> int:
        """Column index one past the record's last column."""
        return self.column_start + self.column_count

    def visible_column_count(self, columns_per_page: int) -> int:
        """Columns drawn on the page; overflowing records are clipped."""
        return max(0, min(self.column_count, columns_per_page - self.column_start))


@dataclass(frozen=True)
class PageLayout:
    """
    Record placements on a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Placements in reading order (right to left)
    """

    index: int
    placements: Tuple[RecordPlacement, ...]

    @property
    def placement_count(self) -> int:
        return len(self.placements)

    @property
    def columns_used(self) -> int:
        """Columns covered by placed records, excluding the trailing gap."""
        if not self.placements:
            return 0
        return self.placements[-1].column_end


@dataclass(frozen=True)
class DocumentLayout:
    """
    Final layout output for a document.

    Attributes:
        pages: Pages in order; never empty
        has_overflow: True when any record overflows its page
        canvas_size: (width, height) of all pages stacked with gaps
        geometry: Capacities the layout was computed with

    Example:
        >>> layout = compose(records, LayoutSettings())
        >>> layout.page_count
        2
    """

    pages: Tuple[PageLayout, ...]
    has_overflow: bool
    canvas_size: Tuple[float, float]
    geometry: LayoutGeometry

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        return sum(p.placement_count for p in self.pages)

    @property
    def placements(self) -> Tuple[RecordPlacement, ...]:
        """All placements across pages, in document order."""
        return tuple(pl for page in self.pages for pl in page.placements)

    @property
    def overflow_indices(self) -> FrozenSet[int]:
        """Indices of records flagged as overflowing."""
        return frozenset(pl.record_index for pl in self.placements if pl.overflow)

    @property
    def record_page_map(self) -> Dict[int, int]:
        """Map of record index to the page index it was placed on."""
        return {
            pl.record_index: page.index
            for page in self.pages
            for pl in page.placements
        }
