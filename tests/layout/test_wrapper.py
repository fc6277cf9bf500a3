"""
Tests for layout.wrapper

Test Coverage:
- wrap_columns(): character-count wrapping into vertical columns
- Line feed and carriage return handling
- Empty bodies and exact multiples of the column capacity
"""

import math

import pytest

from vertical_script.layout.wrapper import wrap_columns


class TestWrapColumns:
    """Tests for wrap_columns()."""

    def test_wrap_when_body_empty_then_single_empty_column(self):
        assert wrap_columns("", 5) == ("",)

    def test_wrap_when_body_longer_than_limit_then_hard_breaks(self):
        assert wrap_columns("ABCDE", 2) == ("AB", "CD", "E")

    def test_wrap_when_length_divisible_then_no_trailing_empty_column(self):
        assert wrap_columns("ABCD", 2) == ("AB", "CD")

    def test_wrap_when_trailing_newline_then_final_empty_column(self):
        assert wrap_columns("AB\nCD\n", 10) == ("AB", "CD", "")

    def test_wrap_when_blank_line_then_preserved_as_empty_column(self):
        assert wrap_columns("AB\n\nCD", 10) == ("AB", "", "CD")

    def test_wrap_when_carriage_returns_then_dropped(self):
        assert wrap_columns("A\r\nB\r", 10) == ("A", "B")

    def test_wrap_when_only_newlines_then_one_column_per_break_plus_open_column(self):
        assert wrap_columns("\n\n", 5) == ("", "", "")

    def test_wrap_when_word_crosses_limit_then_breaks_mid_word(self):
        assert wrap_columns("hello world", 4) == ("hell", "o wo", "rld")

    def test_wrap_when_limit_not_positive_then_treated_as_one(self):
        assert wrap_columns("abc", 0) == ("a", "b", "c")

    def test_wrap_when_full_column_then_newline_then_empty_column_emitted(self):
        """A line feed right after a capacity break still closes an (empty) column."""
        assert wrap_columns("AB\nC", 2) == ("AB", "", "C")

    def test_wrap_when_none_body_then_single_empty_column(self):
        assert wrap_columns(None, 3) == ("",)


class TestWrapProperties:
    """Properties that hold for all bodies."""

    @pytest.mark.parametrize("limit", [1, 3, 7])
    @pytest.mark.parametrize("length", [0, 1, 2, 3, 6, 7, 13, 21, 22])
    def test_column_count_when_no_newlines_then_ceil_of_length(self, length, limit):
        # Arrange
        body = "字" * length

        # Act
        columns = wrap_columns(body, limit)

        # Assert
        assert len(columns) == max(1, math.ceil(length / limit))
        assert all(len(col) == limit for col in columns[:-1])
        assert 0 < len(columns[-1]) <= limit or length == 0

    def test_concatenation_when_joined_then_reproduces_body_without_breaks(self):
        body = "一行目です\r\n二行目\n\nおわり"

        columns = wrap_columns(body, 3)

        assert "".join(columns) == body.replace("\r", "").replace("\n", "")
        assert all(len(col) <= 3 for col in columns)

    def test_wrap_when_called_twice_then_identical(self):
        body = "同じ入力は\n同じ出力"
        assert wrap_columns(body, 4) == wrap_columns(body, 4)
