"""
Module: controller

Purpose:
    Orchestrate one editing session.
    Document → Compose → Status → Attention tracker → (optional) PDF export

Key Classes:
    - EditorSession: Owns the document, settings and attention tracker

Dependencies:
    - layout: Composition
    - attention: Tracker and status
    - output.renderer: PDF export gate
    - core.utils.serialization: Document files
    - logging_utils: Status queue for an editor status area

Used By:
    - cli: Command line entry points
    - An embedding editor surface
"""

from __future__ import annotations

import logging
from pathlib import Path
from queue import Queue
from typing import Optional

from vertical_script.attention import (
    AttentionUpdate,
    LayoutStatus,
    OverflowAttentionTracker,
    build_status,
)
from vertical_script.attention.tracker import IndicesCallback
from vertical_script.core.models import DocumentState
from vertical_script.core.utils.serialization import load_document, save_document
from vertical_script.layout import DocumentLayout, LayoutSettings, compose_document
from vertical_script.logging_utils import (
    StatusQueueHandler,
    attach_status_queue,
    detach_status_queue,
)
from vertical_script.output.renderer import ensure_exportable, render_to_pdf

logger = logging.getLogger(__name__)


class EditorSession:
    """
    One document being edited, with its layout and overflow attention.

    The layout is recomputed in full by ``refresh()`` after every change;
    the most recent result is what the export gate checks.

    Example:
        >>> session = EditorSession(on_new_overflow=show_banner)
        >>> session.document.records[0].body = "..."
        >>> status = session.refresh(focused_record_index=0)
        >>> status.total_pages
        1
    """

    def __init__(
        self,
        document: Optional[DocumentState] = None,
        settings: Optional[LayoutSettings] = None,
        *,
        on_new_overflow: Optional[IndicesCallback] = None,
        on_still_unresolved: Optional[IndicesCallback] = None,
        on_attention_changed: Optional[IndicesCallback] = None,
        status_queue: Optional[Queue] = None,
    ) -> None:
        self._document = (document or DocumentState.create_default()).normalize()
        self._settings = settings or LayoutSettings()
        self._tracker = OverflowAttentionTracker(
            on_new_overflow=on_new_overflow,
            on_still_unresolved=on_still_unresolved,
            on_attention_changed=on_attention_changed,
        )
        self._focused_index: Optional[int] = None
        self._layout: DocumentLayout = compose_document(self._document, self._settings)
        self._last_update: Optional[AttentionUpdate] = None
        self._status_handler: Optional[StatusQueueHandler] = None
        if status_queue is not None:
            self._status_handler = attach_status_queue(status_queue)

    def close(self) -> None:
        """Stop feeding the status queue, if one was given."""
        if self._status_handler is not None:
            detach_status_queue(self._status_handler)
            self._status_handler = None

    @property
    def document(self) -> DocumentState:
        return self._document

    @property
    def settings(self) -> LayoutSettings:
        return self._settings

    @property
    def layout(self) -> DocumentLayout:
        """Layout from the most recent refresh."""
        return self._layout

    @property
    def tracker(self) -> OverflowAttentionTracker:
        return self._tracker

    @property
    def last_update(self) -> Optional[AttentionUpdate]:
        return self._last_update

    def refresh(
        self,
        focused_record_index: Optional[int] = None,
        current_page: Optional[int] = None,
    ) -> LayoutStatus:
        """
        Recompose the layout and feed the attention tracker.

        Call after every document edit or focus change.

        Args:
            focused_record_index: Record holding focus, or None
            current_page: 1-based page in view, or None to follow focus

        Returns:
            LayoutStatus for the new layout
        """
        self._document.normalize()
        self._focused_index = focused_record_index
        self._layout = compose_document(self._document, self._settings)
        status = build_status(self._layout, focused_record_index, current_page)
        self.report_status(status)
        return status

    def report_status(self, status: LayoutStatus) -> AttentionUpdate:
        """Deliver a layout status (e.g. from the display surface) to the tracker."""
        self._last_update = self._tracker.update(
            status.overflow_records, status.focused_record_index
        )
        return self._last_update

    def apply_settings(self, settings: LayoutSettings) -> LayoutStatus:
        """Swap layout settings and recompose."""
        self._settings = settings
        return self.refresh(self._focused_index)

    def replace_document(self, document: DocumentState) -> LayoutStatus:
        """
        Replace the whole document (new, open, or a snapshot jump).

        Overflow history belongs to the old document and is cleared.
        """
        self._document = document.normalize()
        self._tracker.reset()
        self._last_update = None
        return self.refresh(None)

    def new_document(self) -> LayoutStatus:
        return self.replace_document(DocumentState.create_default())

    def open_document(self, path: Path) -> LayoutStatus:
        """Load a document file and make it the current document."""
        document = load_document(path)
        return self.replace_document(document)

    def save_document(self, path: Path) -> None:
        save_document(path, self._document)

    def export_pdf(self, path: Path) -> None:
        """
        Finalize output to PDF.

        The layout is recomposed first, so edits made since the last
        refresh() are both exported and checked for overflow.

        Raises:
            UnresolvedOverflowError: If any record overflows its page
            ExportError: If the PDF cannot be written
        """
        self.refresh(self._focused_index)
        ensure_exportable(self._layout)
        render_to_pdf(
            self._layout,
            self._settings,
            Path(path),
            role_colors=self._document.role_dictionary,
            page_numbers=self._document.page_number_enabled,
        )
