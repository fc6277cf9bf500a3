"""
Module: logging_utils

Purpose:
    Route engine log output to the places that show it: a status queue
    read by an editor's status area, or the console for command line use.

Key Classes:
    - StatusEntry: One status line, with the overflow notice behind it
    - StatusQueueHandler: logging.Handler that enqueues StatusEntry items

Key Functions:
    - attach_status_queue() / detach_status_queue()
    - configure_cli_logging()

Used By:
    - controller.EditorSession (status_queue)
    - cli
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from queue import Queue
from typing import Optional, Tuple

from vertical_script.attention.tracker import Notice

ENGINE_LOGGER = "vertical_script"


@dataclass(frozen=True)
class StatusEntry:
    """
    A message for the editor's status area.

    Attributes:
        message: Formatted log message
        level: "INFO", "WARNING" or "ERROR"
        notice: Overflow notice kind when the tracker raised it, else None
        records: Record indices the notice refers to (0-based)
    """

    message: str
    level: str
    notice: Optional[Notice] = None
    records: Tuple[int, ...] = ()

    @property
    def is_overflow_notice(self) -> bool:
        return self.notice is not None


class StatusQueueHandler(logging.Handler):
    """
    Put StatusEntry items on a queue for a UI thread to drain.

    Overflow notices logged by the attention tracker carry ``notice`` and
    ``records`` extras; those are copied onto the entry so the status area
    can jump to or highlight the records without parsing the message.
    """

    def __init__(self, status_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.status_queue = status_queue
        self.previous_level = logging.NOTSET
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            notice = getattr(record, "notice", None)
            entry = StatusEntry(
                message=self.format(record),
                level="INFO" if record.levelno < logging.WARNING else record.levelname,
                notice=Notice(notice) if notice is not None else None,
                records=tuple(getattr(record, "records", ())),
            )
            self.status_queue.put(entry)
        except Exception:
            self.handleError(record)


def attach_status_queue(
    status_queue: Queue,
    level: int = logging.INFO,
    logger_name: str = ENGINE_LOGGER,
) -> StatusQueueHandler:
    """
    Start forwarding engine log output to a status queue.

    Returns:
        The attached handler, for detach_status_queue()
    """
    logger = logging.getLogger(logger_name)
    handler = StatusQueueHandler(status_queue, level)
    handler.previous_level = logger.level
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    logger.addHandler(handler)
    return handler


def detach_status_queue(handler: StatusQueueHandler, logger_name: str = ENGINE_LOGGER) -> None:
    """Stop forwarding and restore the logger level set at attach time."""
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)
    logger.setLevel(handler.previous_level)


def configure_cli_logging(verbose: bool = False) -> None:
    """Console logging for command line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )
