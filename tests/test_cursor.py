"""Tests for cursor infrastructure.

Validates the immutable cursor used by the pattern compiler and the input
scanner.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from durationlex.syntax.cursor import Cursor, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor("12-05", 0)

        assert cursor.source == "12-05"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("12-05", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_is_eof(self) -> None:
        """is_eof at and beyond the end, including empty source."""
        assert Cursor("12", 2).is_eof
        assert Cursor("12", 10).is_eof
        assert Cursor("", 0).is_eof
        assert not Cursor("12", 1).is_eof


# ============================================================================
# CURRENT AND PEEK
# ============================================================================


class TestCursorCurrent:
    """Test current character access."""

    def test_current_in_middle(self) -> None:
        """current returns the character at pos."""
        assert Cursor("12-05", 2).current == "-"

    def test_current_raises_eof_error_at_end(self) -> None:
        """current at EOF raises EOFError."""
        with pytest.raises(EOFError, match="position 5"):
            _ = Cursor("12-05", 5).current

    def test_peek(self) -> None:
        """peek looks ahead without moving."""
        cursor = Cursor("FF6", 0)

        assert cursor.peek() == "F"
        assert cursor.peek(2) == "6"
        assert cursor.peek(3) is None
        assert cursor.pos == 0


# ============================================================================
# ADVANCE AND SLICE
# ============================================================================


class TestCursorAdvance:
    """Test cursor advancement."""

    def test_advance_single_position(self) -> None:
        """advance() returns a new cursor one step on."""
        cursor = Cursor("12-05", 0)
        new_cursor = cursor.advance()

        assert new_cursor.pos == 1
        assert cursor.pos == 0

    def test_advance_multiple_positions(self) -> None:
        """advance(n) skips n characters."""
        assert Cursor("12-05", 0).advance(3).current == "0"

    def test_advance_beyond_eof_clamps_to_length(self) -> None:
        """Advancing past the end stops at EOF."""
        cursor = Cursor("12", 1).advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_slice_to(self) -> None:
        """slice_to extracts from pos to end_pos."""
        assert Cursor("HH24:MI", 0).slice_to(4) == "HH24"
        assert Cursor("HH24:MI", 5).slice_to(7) == "MI"
        assert Cursor("HH24:MI", 3).slice_to(3) == ""


# ============================================================================
# MATCHING HELPERS
# ============================================================================


class TestCursorMatching:
    """Test startswith, skip_whitespace and take_digits."""

    def test_startswith_exact(self) -> None:
        """Case-sensitive by default."""
        cursor = Cursor("days", 0)

        assert cursor.startswith("day")
        assert not cursor.startswith("DAY")
        assert cursor.startswith("DAY", ignore_case=True)

    def test_startswith_ignore_case_ascii_only(self) -> None:
        """Non-ASCII text never case-maps onto an ASCII keyword."""
        assert "\ufb00".upper() == "FF"
        assert not Cursor("\ufb00", 0).startswith("FF", ignore_case=True)
        assert not Cursor("\u00df", 0).startswith("SS", ignore_case=True)
        assert Cursor("ff", 0).startswith("FF", ignore_case=True)

    def test_startswith_past_end(self) -> None:
        """A prefix longer than the remainder never matches."""
        assert not Cursor("mi", 1).startswith("ix")

    def test_skip_whitespace(self) -> None:
        """Spaces, tabs and newlines are skipped."""
        cursor = Cursor(" \t\n 7", 0).skip_whitespace()

        assert cursor.pos == 4
        assert cursor.current == "7"

    def test_skip_whitespace_to_eof(self) -> None:
        """All-whitespace input reaches EOF."""
        assert Cursor("   ", 0).skip_whitespace().is_eof

    def test_take_digits_limited(self) -> None:
        """At most limit digits are consumed."""
        result = Cursor("123456", 1).take_digits(2)

        assert result.value == "23"
        assert result.cursor.pos == 3

    def test_take_digits_unbounded(self) -> None:
        """None consumes every leading digit."""
        result = Cursor("178000000-00", 0).take_digits(None)

        assert result.value == "178000000"
        assert result.cursor.current == "-"

    def test_take_digits_none_present(self) -> None:
        """No digits yields an empty value and an unmoved cursor."""
        result = Cursor("x1", 0).take_digits()

        assert result.value == ""
        assert result.cursor.pos == 0

    def test_take_digits_ascii_only(self) -> None:
        """Non-ASCII digits are not consumed."""
        assert Cursor("١٢", 0).take_digits().value == ""

    @given(digits=st.text(alphabet="0123456789", max_size=20), limit=st.integers(1, 25))
    def test_take_digits_property(self, digits: str, limit: int) -> None:
        """The consumed run is the longest prefix within limit."""
        result = Cursor(digits + "-", 0).take_digits(limit)

        assert result.value == digits[:limit]
        assert result.cursor.pos == len(result.value)


# ============================================================================
# LINE AND COLUMN
# ============================================================================


class TestCursorLineCol:
    """Test line and column computation."""

    def test_compute_line_col_at_start(self) -> None:
        """Start is line 1, column 1."""
        assert Cursor("DD", 0).compute_line_col() == (1, 1)

    def test_compute_line_col_in_first_line(self) -> None:
        """Columns are 1-indexed."""
        assert Cursor("DD HH24", 3).compute_line_col() == (1, 4)

    def test_compute_line_col_after_newline(self) -> None:
        """A newline starts a new line."""
        assert Cursor("DD\nHH24", 3).compute_line_col() == (2, 1)
        assert Cursor("a\nb\ncd", 5).compute_line_col() == (3, 2)


# ============================================================================
# PARSE RESULT
# ============================================================================


class TestParseResult:
    """Test ParseResult container."""

    def test_create_parse_result(self) -> None:
        """ParseResult pairs a value with a cursor."""
        cursor = Cursor("07", 1)
        result = ParseResult(7, cursor)

        assert result.value == 7
        assert result.cursor is cursor

    def test_parse_result_immutable(self) -> None:
        """ParseResult is frozen."""
        result = ParseResult("0", Cursor("07", 1))

        with pytest.raises(AttributeError):
            result.value = "1"  # type: ignore[misc]
