"""
Command line interface.

    python -m vertical_script layout script.vse [--json]
    python -m vertical_script export script.vse script.pdf

Exit status: 0 on success, 1 on overflow (layout) or load/export
failure, 2 when export is refused because of unresolved overflow.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vertical_script import __version__
from vertical_script.attention import build_status
from vertical_script.controller import EditorSession
from vertical_script.core.utils.serialization import DocumentFileError
from vertical_script.layout import LayoutSettings
from vertical_script.logging_utils import configure_cli_logging
from vertical_script.output.renderer import ExportError, UnresolvedOverflowError
from vertical_script.settings import SettingsStore

logger = logging.getLogger("vertical_script.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OVERFLOW_REFUSED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vertical-script",
        description="Paginate and export vertically-set script documents.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--settings", type=Path, default=None,
        help="Application settings file (default: per-user settings)",
    )
    parser.add_argument(
        "--role-label-chars", type=float, default=None,
        help="Role label band height in character cells (overrides settings)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_layout = sub.add_parser("layout", help="Show pagination and overflow summary")
    p_layout.add_argument("document", type=Path, help="Document file")
    p_layout.add_argument("--json", action="store_true", help="Print status as JSON")

    p_export = sub.add_parser("export", help="Export the document to PDF")
    p_export.add_argument("document", type=Path, help="Document file")
    p_export.add_argument("output", type=Path, help="PDF output path")
    p_export.add_argument(
        "--no-page-numbers", action="store_true",
        help="Omit page numbers regardless of the document flag",
    )

    return parser


def _layout_settings(args: argparse.Namespace) -> LayoutSettings:
    """Layout settings from the settings store and command line overrides."""
    app_settings = SettingsStore(args.settings).settings
    settings = app_settings.layout_settings()
    if args.role_label_chars is not None:
        if args.role_label_chars <= 0:
            raise ValueError("--role-label-chars must be greater than 0")
        settings = settings.with_role_label_chars(args.role_label_chars)
    return settings


def _cmd_layout(session: EditorSession, args: argparse.Namespace) -> int:
    status = build_status(session.layout)
    if args.json:
        print(json.dumps(status.to_dict()))
    else:
        print(f"Pages: {status.total_pages}")
        print(f"Records: {len(session.document.records)}")
        if status.has_overflow:
            listed = ", ".join(str(i + 1) for i in sorted(status.overflow_records))
            print(f"Overflow: {status.overflow_count} record(s) do not fit on one page: {listed}")
        else:
            print("Overflow: none")
    return EXIT_FAILURE if status.has_overflow else EXIT_OK


def _cmd_export(session: EditorSession, args: argparse.Namespace) -> int:
    if args.no_page_numbers:
        session.document.page_number_enabled = False
    try:
        session.export_pdf(args.output)
    except UnresolvedOverflowError as e:
        logger.error(f"Export refused. {e}")
        return EXIT_OVERFLOW_REFUSED
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        return EXIT_FAILURE
    print(f"Exported {session.layout.page_count} pages to {args.output}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.verbose)

    try:
        settings = _layout_settings(args)
    except ValueError as e:
        parser.error(str(e))

    session = EditorSession(settings=settings)
    try:
        session.open_document(args.document)
    except DocumentFileError as e:
        logger.error(f"Could not open {args.document}: {e}")
        return EXIT_FAILURE

    if args.command == "layout":
        return _cmd_layout(session, args)
    return _cmd_export(session, args)


if __name__ == "__main__":
    sys.exit(main())
