"""Role dictionary helpers: role listing and color normalization."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..models.records import DocumentState

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def collect_roles(document: DocumentState) -> List[str]:
    """
    List every role known to a document.

    Union of role dictionary keys and trimmed, non-blank record role
    names; de-duplicated and sorted.
    """
    roles = set(document.role_dictionary.keys())
    for record in document.records:
        name = (record.role_name or "").strip()
        if name:
            roles.add(name)
    return sorted(roles)


def normalize_color(text: Optional[str]) -> str:
    """
    Normalize a user-entered color.

    Example:
        >>> normalize_color(" f00 ")
        '#f00'
        >>> normalize_color("#123456")
        '#123456'
        >>> normalize_color("red")
        'red'
    """
    color = (text or "").strip()
    if not color:
        return ""
    if color.startswith("#"):
        return color
    if len(color) in (3, 6) and all(ch in _HEX_DIGITS for ch in color):
        return f"#{color}"
    return color


def build_role_dictionary(entries: Iterable[Tuple[Optional[str], Optional[str]]]) -> dict[str, str]:
    """
    Build a role dictionary from (role, color) entries.

    Entries with a blank role or color are dropped; a later entry for
    the same role replaces an earlier one.
    """
    result: dict[str, str] = {}
    for role, color in entries:
        name = (role or "").strip()
        value = normalize_color(color)
        if not name or not value:
            continue
        result[name] = value
    return result
