"""
Module: records

Purpose:
    Provides the script document model: an ordered list of (role, body)
    records plus the role-to-color dictionary and page number flag.
    Records are mutable and owned by the document; their order is the
    right-to-left reading order.

Key Classes:
    - ScriptRecord: One role line with its body text
    - DocumentState: The document being edited

Key Functions:
    - DocumentState.create_default(): Document with one blank record
    - DocumentState.normalize(): Enforce the non-empty invariant
    - DocumentState.to_dict() / DocumentState.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - layout.composer
    - core.utils.serialization
    - controller.EditorSession
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


def _text(value: Any) -> str:
    """Coerce a malformed or missing text field to a string."""
    return value if isinstance(value, str) else ""


def _get_ci(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Case-insensitive mapping lookup; exact match wins."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == lowered:
            return v
    return default


@dataclass
class ScriptRecord:
    """
    A single script record (mutable).

    Attributes:
        role_name: Speaker or role label
        body: Spoken text; may contain line breaks

    Example:
        >>> ScriptRecord("太郎", "こんにちは").to_dict()
        {'roleName': '太郎', 'body': 'こんにちは'}
    """

    role_name: str = ""
    body: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"roleName": self.role_name, "body": self.body}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScriptRecord:
        """Build a record; missing or non-string fields become empty."""
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            role_name=_text(_get_ci(data, "roleName")),
            body=_text(_get_ci(data, "body")),
        )


@dataclass
class DocumentState:
    """
    The document being edited (mutable).

    Attributes:
        records: Ordered records; normalized to never be empty
        page_number_enabled: Whether exported pages carry page numbers
        role_dictionary: Role name to color string (e.g. "#ff0000")

    Invariants:
        - After normalize(), records holds at least one record
        - Record order is reading order and is never changed here
    """

    records: List[ScriptRecord] = field(default_factory=list)
    page_number_enabled: bool = True
    role_dictionary: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def create_default(cls) -> DocumentState:
        """Return a fresh document holding exactly one blank record."""
        return cls(records=[ScriptRecord()])

    def normalize(self) -> DocumentState:
        """
        Enforce the document invariants in place.

        An empty record list becomes one blank record and None fields
        become empty strings.

        Returns:
            self, for chaining
        """
        if not self.records:
            self.records = [ScriptRecord()]
        for record in self.records:
            record.role_name = _text(record.role_name)
            record.body = _text(record.body)
        if not isinstance(self.role_dictionary, dict):
            self.role_dictionary = {}
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": [r.to_dict() for r in self.records],
            "pageNumberEnabled": self.page_number_enabled,
            "roleDictionary": dict(self.role_dictionary),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DocumentState:
        """
        Build a normalized document from its dictionary form.

        Keys are matched case-insensitively.
        """
        raw_records = _get_ci(data, "records") or []
        raw_roles = _get_ci(data, "roleDictionary") or {}
        page_numbers = _get_ci(data, "pageNumberEnabled", True)

        document = cls(
            records=[ScriptRecord.from_dict(r) for r in raw_records],
            page_number_enabled=bool(page_numbers) if page_numbers is not None else True,
            role_dictionary={
                str(k): v for k, v in raw_roles.items() if isinstance(v, str)
            },
        )
        return document.normalize()
