"""
Module: layout.wrapper

Purpose:
    Split one record body into fixed-capacity vertical columns.
    Wrapping is by raw character count: no word or grapheme awareness.

Key Functions:
    - wrap_columns(): Body text to a tuple of column strings

Used By:
    - layout.composer: Page composition
"""

from __future__ import annotations

from typing import Tuple


def wrap_columns(body: str, max_chars_per_column: int) -> Tuple[str, ...]:
    """
    Wrap body text into vertical columns.

    Rules:
    1. Carriage returns are dropped.
    2. A line feed closes the current column (even an empty one) and
       opens a new one, so blank lines survive as empty columns.
    3. Reaching max_chars_per_column closes the column mid-word.
    4. The final open column is emitted when it holds text, when it was
       opened by a line feed, or when nothing was emitted yet.

    Args:
        body: Record body, may contain line breaks
        max_chars_per_column: Column capacity; values below 1 count as 1

    Returns:
        Tuple with at least one column string

    Example:
        >>> wrap_columns("AB\\nCD\\n", 10)
        ('AB', 'CD', '')
        >>> wrap_columns("ABCDE", 2)
        ('AB', 'CD', 'E')
        >>> wrap_columns("", 5)
        ('',)
    """
    limit = max(1, int(max_chars_per_column))
    columns: list[str] = []
    buffer: list[str] = []
    # True while the open column was started by a line feed
    opened_by_break = False

    for ch in body or "":
        if ch == "\r":
            continue
        if ch == "\n":
            columns.append("".join(buffer))
            buffer = []
            opened_by_break = True
            continue

        buffer.append(ch)
        if len(buffer) >= limit:
            columns.append("".join(buffer))
            buffer = []
            opened_by_break = False

    if buffer or opened_by_break or not columns:
        columns.append("".join(buffer))

    return tuple(columns)
