"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that the engine's guarantees hold for arbitrary input
and arbitrary sequences of recognition attempts.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from escaner.errors import EscanerError, UnexpectedEndOfInput
from escaner.patterns import DIGITS, TURBOFISH, Literal
from escaner.recognizer import recognize
from escaner.scanner import Scanner
from escaner.tokens import Token

PATTERNS = [DIGITS, TURBOFISH, Literal("ab"), *Token]

texts = st.text(alphabet="0123456789 +=:<>ab()", max_size=60)
attempts = st.lists(st.sampled_from(PATTERNS), max_size=30)


class Exploding:
    """Matcher that fails the test if it is ever invoked."""

    def __init__(self, size: int) -> None:
        self._size = size

    def size(self) -> int:
        return self._size

    def recognize(self, scanner: Scanner[str]) -> None:
        raise AssertionError("recognizable must not be invoked")


class TestCursorInvariants:
    """The cursor only moves forward and stays within bounds."""

    @given(texts, attempts)
    @settings(max_examples=200)
    def test_monotonic_and_bounded(self, source: str, patterns: list) -> None:
        scanner = Scanner(source)
        previous = scanner.current_position()
        for pattern in patterns:
            try:
                recognize(pattern, scanner)
            except EscanerError:
                pass
            position = scanner.current_position()
            assert previous <= position <= len(source)
            previous = position

    @given(texts, attempts)
    @settings(max_examples=200)
    def test_no_mutation_on_failure(self, source: str, patterns: list) -> None:
        scanner = Scanner(source)
        for pattern in patterns:
            before = scanner.current_position()
            if scanner.is_empty():
                break
            if pattern.recognize(scanner) is None:
                assert scanner.current_position() == before


class TestConsumption:
    """Matches consume exactly what the matcher reports."""

    @given(texts, st.sampled_from(PATTERNS))
    @settings(max_examples=200)
    def test_exact_consumption(self, source: str, pattern) -> None:  # type: ignore[no-untyped-def]
        scanner = Scanner(source)
        if scanner.is_empty():
            return
        matched, consumed = scanner.try_match(pattern)
        view = pattern.recognize(scanner)
        if not matched:
            assert view is None
            assert scanner.current_position() == 0
            return
        assert len(view) == consumed
        assert view.span == (0, consumed)
        assert scanner.current_position() == consumed
        assert view == source[:consumed]

    @given(st.text(alphabet="0123456789", min_size=1, max_size=40))
    def test_size_is_only_a_lower_bound(self, digits: str) -> None:
        """A size-0 digit run consumes the whole run."""
        scanner = Scanner(digits + "x")
        view = recognize(DIGITS, scanner)
        assert len(view) == len(digits) >= DIGITS.size()


class TestFastFail:
    """Short input fails before the recognizable runs."""

    @given(st.text(max_size=10), st.integers(min_value=1, max_value=20))
    def test_short_input_never_invokes(self, source: str, extra: int) -> None:
        scanner = Scanner(source)
        with pytest.raises(UnexpectedEndOfInput):
            recognize(Exploding(len(source) + extra), scanner)
        assert scanner.current_position() == 0
