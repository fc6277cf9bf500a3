"""
Module: layout.composer

Purpose:
    Arrange records onto pages as right-to-left runs of columns.
    Single pass, one running column cursor, no backtracking.

Key Functions:
    - compose(): Main pagination function
    - compose_document(): compose() for a DocumentState

Algorithm:
    1. Wrap each record body into columns of body_chars_per_column
    2. A record wider than the page is flagged as overflow
    3. Break to a new page only when the page already has content and
       the record does not fit in the remaining columns
    4. Advance the cursor by the record's columns plus the record gap

    Because a record alone on a page is never moved, every page holds
    at least one record and page count never exceeds record count.

Dependencies:
    - layout.wrapper: wrap_columns
    - layout.geometry: compute_geometry
    - layout.models: RecordPlacement, PageLayout, DocumentLayout

Used By:
    - controller.EditorSession: Recomputed on every change
    - cli: layout and export commands
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from vertical_script.core.models.records import DocumentState, ScriptRecord

from .config import LayoutSettings
from .geometry import compute_geometry
from .models import DocumentLayout, PageLayout, RecordPlacement
from .wrapper import wrap_columns

logger = logging.getLogger(__name__)


def _record_body(record: Any) -> str:
    """Body text of a record, empty when missing or malformed."""
    body = getattr(record, "body", None)
    return body if isinstance(body, str) else ""


def compose(
    records: Sequence[ScriptRecord],
    settings: LayoutSettings,
) -> DocumentLayout:
    """
    Arrange records onto pages.

    Rules:
    1. Records keep document order; none are dropped or merged.
    2. A record occupies max(1, len(columns)) columns.
    3. A record that does not fit in the columns left on a non-empty
       page starts a new page at column 0.
    4. A record wider than a whole page stays where it is and is
       marked overflow (it is clipped when drawn).

    The result is a pure function of the inputs.

    Args:
        records: Records in reading order
        settings: Layout settings

    Returns:
        DocumentLayout with at least one page

    Example:
        >>> layout = compose([ScriptRecord("A", "x" * 30)], settings)
        >>> layout.pages[0].placements[0].column_count
        3
    """
    geometry = compute_geometry(settings)
    columns_per_page = geometry.columns_per_page
    gap = settings.record_gap_columns

    pages: List[PageLayout] = []
    current: List[RecordPlacement] = []
    cursor = 0
    has_overflow = False

    for index, record in enumerate(records):
        columns = wrap_columns(_record_body(record), geometry.body_chars_per_column)
        column_count = max(1, len(columns))
        overflow = column_count > columns_per_page

        if overflow:
            has_overflow = True
            logger.debug(
                f"Record {index} overflows its page: "
                f"{column_count} columns needed, {columns_per_page} available"
            )

        if cursor > 0 and cursor + column_count > columns_per_page:
            pages.append(PageLayout(index=len(pages), placements=tuple(current)))
            current = []
            cursor = 0

        current.append(RecordPlacement(
            record_index=index,
            record=record,
            columns=columns,
            column_start=cursor,
            column_count=column_count,
            overflow=overflow,
        ))
        cursor += column_count + gap

    # The open page is kept even when empty so that an empty record
    # sequence still yields one page.
    pages.append(PageLayout(index=len(pages), placements=tuple(current)))

    page_count = len(pages)
    canvas_height = (
        settings.page_height * page_count
        + settings.effective_page_gap * max(0, page_count - 1)
    )

    logger.debug(f"Paginated {len(records)} records onto {page_count} pages")

    return DocumentLayout(
        pages=tuple(pages),
        has_overflow=has_overflow,
        canvas_size=(settings.page_width, canvas_height),
        geometry=geometry,
    )


def compose_document(document: DocumentState, settings: LayoutSettings) -> DocumentLayout:
    """Compose a document's records; the document is not modified."""
    return compose(document.records, settings)
