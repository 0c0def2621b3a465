"""Tests for the reusable matcher functions."""

import pytest

from escaner.matchers import match_char, match_number, match_pattern
from escaner.view import View


class TestMatchChar:
    """Single-element matching."""

    def test_matches_text(self) -> None:
        assert match_char("(", "(x") == (True, 1)

    def test_matches_bytes(self) -> None:
        """A one-character str matches the byte value."""
        assert match_char("(", b"(x") == (True, 1)

    def test_matches_int_expectation(self) -> None:
        assert match_char(ord("("), b"(x") == (True, 1)

    def test_mismatch(self) -> None:
        assert match_char("(", ")") == (False, 0)

    def test_empty_input(self) -> None:
        assert match_char("(", "") == (False, 0)
        assert match_char("(", View("abc", 3)) == (False, 0)

    def test_generic_elements(self) -> None:
        assert match_char("if", ("if", "x")) == (True, 1)

    def test_multi_char_expectation_on_bytes(self) -> None:
        """A multi-character str can never equal a single byte."""
        assert match_char("ab", b"ab") == (False, 0)
        assert match_char("", b"a") == (False, 0)


class TestMatchNumber:
    """Runs of decimal digits."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("12a", (True, 2)),
            ("7", (True, 1)),
            ("0042 ", (True, 4)),
            (b"123+", (True, 3)),
            ("a12", (False, 0)),
            ("", (False, 0)),
        ],
    )
    def test_digit_runs(self, data: str | bytes, expected: tuple[bool, int]) -> None:
        assert match_number(data) == expected

    def test_non_ascii_digits_rejected(self) -> None:
        """Only ASCII digits form a number."""
        assert match_number("٣") == (False, 0)

    def test_stops_at_view_end(self) -> None:
        assert match_number(View("12345", 0, 2)) == (True, 2)

    def test_unhashable_elements(self) -> None:
        """Non-text elements are simply not digits."""
        assert match_number([{"k": 1}, ["1"]]) == (False, 0)
        assert match_number(View([{"k": 1}])) == (False, 0)

    def test_digits_then_unhashable_element(self) -> None:
        assert match_number(["1", "2", {"k": 1}]) == (True, 2)


class TestMatchPattern:
    """Fixed multi-element sequences."""

    def test_matches_prefix(self) -> None:
        assert match_pattern("::<>", "::<>b") == (True, 4)

    def test_input_shorter_than_pattern(self) -> None:
        assert match_pattern("::<>", "3") == (False, 0)
        assert match_pattern("::<>", "") == (False, 0)

    def test_partial_prefix(self) -> None:
        assert match_pattern("::<>", "::<b") == (False, 0)

    def test_text_pattern_on_bytes(self) -> None:
        assert match_pattern("::<>", b"::<>") == (True, 4)

    def test_non_ascii_pattern_on_bytes_uses_utf8_length(self) -> None:
        assert match_pattern("é!", "é!".encode()) == (True, 3)

    def test_tuple_input(self) -> None:
        assert match_pattern(tuple("::<>"), tuple("::<>b")) == (True, 4)

    def test_empty_pattern_never_matches(self) -> None:
        assert match_pattern("", "abc") == (False, 0)

    def test_respects_view_bounds(self) -> None:
        assert match_pattern("::<>", View("::<>", 0, 3)) == (False, 0)
