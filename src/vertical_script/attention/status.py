"""
Module: attention.status

Purpose:
    Layout status reported back from the display consumer: page counts,
    the page in view, overflowing records and the focused record.

Key Functions:
    - build_status(): LayoutStatus from a DocumentLayout

Key Classes:
    - LayoutStatus: Status feedback for one layout pass
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from vertical_script.layout.models import DocumentLayout


@dataclass(frozen=True)
class LayoutStatus:
    """
    Status of the most recent layout pass.

    Attributes:
        total_pages: Page count (>= 1)
        current_page: Page in view, 1-based, within [1, total_pages]
        overflow_records: Indices of overflowing records
        focused_record_index: Record holding focus, or None
    """

    total_pages: int
    current_page: int
    overflow_records: FrozenSet[int]
    focused_record_index: Optional[int] = None

    @property
    def overflow_count(self) -> int:
        return len(self.overflow_records)

    @property
    def has_overflow(self) -> bool:
        return bool(self.overflow_records)

    def to_dict(self) -> dict:
        return {
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
            "overflowRecords": sorted(self.overflow_records),
            "overflowCount": self.overflow_count,
            "focusedRecordIndex": self.focused_record_index,
        }


def build_status(
    layout: DocumentLayout,
    focused_record_index: Optional[int] = None,
    current_page: Optional[int] = None,
) -> LayoutStatus:
    """
    Summarize a layout for status display and the attention tracker.

    When current_page is omitted it follows the focused record's page,
    falling back to the first page. An explicit page is clamped.

    Args:
        layout: Result of compose()
        focused_record_index: Record holding focus, or None
        current_page: 1-based page in view, or None

    Returns:
        LayoutStatus
    """
    total = max(1, layout.page_count)

    if current_page is None:
        page_index = layout.record_page_map.get(focused_record_index, 0) \
            if focused_record_index is not None else 0
        current_page = page_index + 1

    return LayoutStatus(
        total_pages=total,
        current_page=min(max(1, current_page), total),
        overflow_records=layout.overflow_indices,
        focused_record_index=focused_record_index,
    )
