"""
Module: output.renderer

Purpose:
    Render a DocumentLayout to PDF using ReportLab.
    Each PageLayout becomes one PDF page; columns run right to left,
    glyphs top to bottom, one glyph per square character cell.

Key Functions:
    - render_to_pdf(): Main rendering function (finalize output)
    - ensure_exportable(): Refuse layouts with unresolved overflow

Key Classes:
    - ExportError: Export failure
    - UnresolvedOverflowError: Export refused because of overflow

Dependencies:
    - reportlab: PDF generation
    - layout.models: DocumentLayout, PageLayout, RecordPlacement
    - layout.config: LayoutSettings

Used By:
    - controller.EditorSession.export_pdf
    - cli: export command
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfgen import canvas

from vertical_script.layout.config import LayoutSettings
from vertical_script.layout.geometry import LayoutGeometry
from vertical_script.layout.models import DocumentLayout, PageLayout, RecordPlacement

logger = logging.getLogger(__name__)

# Built-in Japanese Mincho CID font shipped with ReportLab
GLYPH_FONT = "HeiseiMin-W3"
PAGE_NUMBER_FONT = "Helvetica"
PAGE_NUMBER_FONT_SIZE = 8

# Glyphs at or below this code point are set sideways in vertical text
ROTATE_MAX_CODEPOINT = 0x7F

FRAME_COLOR = colors.lightgrey
TEXT_COLOR = colors.black


class ExportError(Exception):
    """Error while finalizing output."""
    pass


class UnresolvedOverflowError(ExportError):
    """Export refused: a record does not fit on one page."""

    def __init__(self, overflow_records):
        self.overflow_records = frozenset(overflow_records)
        listed = ", ".join(str(i) for i in sorted(self.overflow_records))
        super().__init__(
            f"Unresolved overflow: records [{listed}] do not fit on one page"
        )


def ensure_exportable(layout: DocumentLayout) -> None:
    """
    Precondition for finalizing output.

    Raises:
        UnresolvedOverflowError: If the layout reports overflow
    """
    if layout.has_overflow:
        raise UnresolvedOverflowError(layout.overflow_indices)


def should_rotate(ch: str) -> bool:
    """True for half-width (ASCII) glyphs that are set sideways."""
    return ord(ch) <= ROTATE_MAX_CODEPOINT


def _register_fonts() -> None:
    if GLYPH_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(UnicodeCIDFont(GLYPH_FONT))


def _resolve_color(value: Optional[str]):
    """ReportLab color for a role dictionary entry, or None if unusable."""
    if not value:
        return None
    text = value.strip()
    if text.startswith("#") and len(text) == 4:
        # #rgb shorthand
        text = "#" + "".join(ch * 2 for ch in text[1:])
    try:
        return colors.toColor(text)
    except ValueError:
        logger.debug(f"Ignoring unrecognised role color {value!r}")
        return None


def render_to_pdf(
    layout: DocumentLayout,
    settings: LayoutSettings,
    output_path: Path,
    *,
    role_colors: Optional[Mapping[str, str]] = None,
    page_numbers: bool = True,
) -> None:
    """
    Render a layout to a PDF file.

    Refused outright when the layout has overflow; nothing is written.

    Args:
        layout: Layout from compose()
        settings: Settings the layout was composed with
        output_path: Path to write PDF
        role_colors: Role name to color string for role labels
        page_numbers: Draw "n / total" in the bottom margin

    Raises:
        UnresolvedOverflowError: If layout.has_overflow
        ExportError: If the PDF cannot be written

    Example:
        >>> render_to_pdf(layout, settings, Path("output/script.pdf"))
    """
    ensure_exportable(layout)

    output_path = Path(output_path)
    _register_fonts()
    resolved = {
        role: color
        for role, color in ((r, _resolve_color(c)) for r, c in (role_colors or {}).items())
        if color is not None
    }

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        c = canvas.Canvas(str(output_path), pagesize=(settings.page_width, settings.page_height))
        for page in layout.pages:
            _render_page(c, page, layout.geometry, settings, resolved)
            if page_numbers:
                _draw_page_number(c, page.index + 1, layout.page_count, settings)
            c.showPage()
        c.save()
    except OSError as e:
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: PageLayout,
    geometry: LayoutGeometry,
    settings: LayoutSettings,
    role_colors: Mapping[str, object],
) -> None:
    """Render every placement on one page."""
    for placement in page.placements:
        _draw_placement(c, placement, geometry, settings, role_colors)


def _draw_placement(
    c: canvas.Canvas,
    placement: RecordPlacement,
    geometry: LayoutGeometry,
    settings: LayoutSettings,
    role_colors: Mapping[str, object],
) -> None:
    """
    Draw one record: frame, role label band, then body columns.

    Columns beyond the page's capacity are clipped.
    """
    advance = settings.effective_column_advance
    rect = geometry.content_rect
    draw_columns = placement.visible_column_count(geometry.columns_per_page)
    if draw_columns <= 0 or advance <= 0:
        return

    # ReportLab's origin is bottom-left; layout rects are top-left
    top_y = settings.page_height - rect.top
    left = rect.right - (placement.column_start + draw_columns) * advance

    c.saveState()
    c.setStrokeColor(FRAME_COLOR)
    c.setLineWidth(0.5)
    c.rect(left, top_y - rect.height, draw_columns * advance, rect.height, stroke=1, fill=0)
    c.restoreState()

    band = settings.role_label_band_height
    for offset in range(draw_columns):
        column_left = rect.right - (placement.column_start + offset + 1) * advance

        if offset == 0:
            role = placement.record.role_name or ""
            _draw_vertical_text(
                c, role, column_left, top_y, geometry.role_chars_per_column,
                settings, role_colors.get(role.strip(), TEXT_COLOR),
            )

        if offset < len(placement.columns):
            _draw_vertical_text(
                c, placement.columns[offset], column_left, top_y - band,
                geometry.body_chars_per_column, settings, TEXT_COLOR,
            )


def _draw_vertical_text(
    c: canvas.Canvas,
    text: str,
    column_left: float,
    column_top: float,
    max_chars: int,
    settings: LayoutSettings,
    color,
) -> None:
    """
    Draw text downwards from column_top, one glyph per cell.

    Args:
        c: ReportLab canvas
        text: Glyphs to draw; clipped to max_chars
        column_left: Left edge of the column in points
        column_top: Top edge of the first cell in PDF coordinates
        max_chars: Cells available in the column
        settings: Layout settings (cell size, font size)
        color: Fill color for glyphs
    """
    advance = settings.effective_column_advance
    size = settings.font_size if settings.font_size > 0 else advance
    # Approximate vertical centering for a Mincho face
    baseline_shift = size * 0.35

    c.saveState()
    c.setFillColor(color)
    c.setFont(GLYPH_FONT, size)
    for index, ch in enumerate(text[:max_chars]):
        cx = column_left + advance / 2
        cy = column_top - (index + 0.5) * advance
        if should_rotate(ch):
            c.saveState()
            c.translate(cx, cy)
            c.rotate(-90)
            c.drawCentredString(0, -baseline_shift, ch)
            c.restoreState()
        else:
            c.drawCentredString(cx, cy - baseline_shift, ch)
    c.restoreState()


def _draw_page_number(
    c: canvas.Canvas,
    number: int,
    total: int,
    settings: LayoutSettings,
) -> None:
    """Draw "n / total" centred in the bottom margin."""
    c.saveState()
    c.setFont(PAGE_NUMBER_FONT, PAGE_NUMBER_FONT_SIZE)
    c.setFillColorRGB(0.4, 0.4, 0.4)
    y = max(settings.margin_bottom / 2, PAGE_NUMBER_FONT_SIZE)
    c.drawCentredString(settings.page_width / 2, y, f"{number} / {total}")
    c.restoreState()
