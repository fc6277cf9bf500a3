"""
Tests for the role dictionary helpers.
"""

import pytest

from vertical_script.core.models import DocumentState, ScriptRecord
from vertical_script.core.utils import build_role_dictionary, collect_roles, normalize_color


class TestCollectRoles:

    def test_collect_roles_when_records_and_dictionary_then_sorted_union(self):
        document = DocumentState(
            records=[ScriptRecord(" B "), ScriptRecord("A"), ScriptRecord("   "), ScriptRecord("B")],
            role_dictionary={"C": "#000"},
        )

        assert collect_roles(document) == ["A", "B", "C"]

    def test_collect_roles_when_blank_document_then_empty(self):
        assert collect_roles(DocumentState.create_default()) == []


class TestNormalizeColor:

    @pytest.mark.parametrize("raw, expected", [
        (None, ""),
        ("   ", ""),
        ("#abc", "#abc"),
        (" fff ", "#fff"),
        ("A1B2C3", "#A1B2C3"),
        ("abcd", "abcd"),
        ("red", "red"),
        ("ggg", "ggg"),
    ])
    def test_normalize_color_when_input_then_expected(self, raw, expected):
        assert normalize_color(raw) == expected


class TestBuildRoleDictionary:

    def test_build_when_entries_then_blank_dropped_and_colors_normalized(self):
        entries = [(" 太郎 ", "f00"), ("花子", ""), ("", "#fff"), (None, None), ("次郎", "blue")]

        assert build_role_dictionary(entries) == {"太郎": "#f00", "次郎": "blue"}

    def test_build_when_duplicate_role_then_last_wins(self):
        assert build_role_dictionary([("A", "#111"), ("A", "#222")]) == {"A": "#222"}
