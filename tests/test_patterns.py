"""Tests for concrete patterns: Literal and Digits."""

import pytest

from escaner.errors import UnexpectedEndOfInput
from escaner.patterns import DIGITS, TURBOFISH, Digits, Literal, Pattern
from escaner.scanner import Scanner


class TestLiteral:
    """Fixed-sequence patterns."""

    def test_size_is_pattern_length(self) -> None:
        assert TURBOFISH.size() == 4
        assert Literal("=>").size() == 2

    def test_empty_pattern_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Literal("")

    def test_turbofish_matches_at_start(self) -> None:
        """'::<>b' consumes four characters, leaving 'b'."""
        scanner = Scanner("::<>b")
        view = TURBOFISH.recognize(scanner)
        assert view == "::<>"
        assert len(view) == 4
        assert scanner.current_position() == 4
        assert scanner.remaining() == "b"

    def test_turbofish_over_char_tuple(self) -> None:
        scanner = Scanner(tuple("::<>b"))
        assert TURBOFISH.matcher(scanner.remaining()) == (True, 4)

    def test_turbofish_short_input(self) -> None:
        """Input shorter than the pattern never indexes out of bounds."""
        scanner = Scanner("3")
        assert TURBOFISH.matcher(scanner.remaining()) == (False, 0)
        assert TURBOFISH.recognize(scanner) is None
        assert scanner.current_position() == 0

    def test_is_hashable_and_comparable(self) -> None:
        assert Literal("::<>") == TURBOFISH
        assert hash(Literal("::<>")) == hash(TURBOFISH)


class TestDigits:
    """Digit runs with a conservative size hint."""

    def test_size_is_zero(self) -> None:
        """The hint is a lower bound, not the consumed length."""
        assert Digits().size() == 0
        assert DIGITS.size() == 0

    def test_run_then_mismatch(self) -> None:
        """'12a' consumes '12'; a second attempt on 'a' leaves the cursor."""
        scanner = Scanner("12a")
        view = DIGITS.recognize(scanner)
        assert view == "12"
        assert view.span == (0, 2)
        assert scanner.current_position() == 2

        assert DIGITS.recognize(scanner) is None
        assert scanner.current_position() == 2

    def test_consumes_more_than_size(self) -> None:
        scanner = Scanner("123456")
        view = DIGITS.recognize(scanner)
        assert len(view) > DIGITS.size()
        assert scanner.is_empty()

    def test_exhausted_scanner(self) -> None:
        scanner = Scanner("")
        with pytest.raises(UnexpectedEndOfInput):
            DIGITS.recognize(scanner)


class TestCustomPattern:
    """Subclassing Pattern gives recognition for free."""

    def test_subclass(self) -> None:
        class Vowel(Pattern[str]):
            def matcher(self, data):  # type: ignore[no-untyped-def]
                if data and data[0] in "aeiou":
                    return True, 1
                return False, 0

            def size(self) -> int:
                return 1

        scanner = Scanner("ab")
        assert Vowel().recognize(scanner) == "a"
        assert Vowel().recognize(scanner) is None
        assert scanner.current_position() == 1

    def test_abstract_methods_required(self) -> None:
        class Incomplete(Pattern[str]):
            def size(self) -> int:
                return 1

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]
