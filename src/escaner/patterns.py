"""Concrete patterns built on the matcher functions.

:class:`Pattern` is the base class for anything that is both a matcher and
a size hint; subclasses get recognition against a scanner for free.

Example:
    >>> scanner = Scanner("12a")
    >>> recognize(Digits(), scanner)
    View('12', 0:2)
    >>> Digits().recognize(scanner) is None
    True
    >>> scanner.current_position()
    2

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from escaner.matchers import match_number, match_pattern
from escaner.recognizer import recognize_pattern

if TYPE_CHECKING:
    from escaner.scanner import Scanner
    from escaner.view import View


class Pattern[T](ABC):
    """Base class for concrete patterns.

    Subclasses implement :meth:`matcher` and :meth:`size`.

    """

    __slots__ = ()

    @abstractmethod
    def matcher(self, data: View[T]) -> tuple[bool, int]:
        """Match against the front of ``data``."""

    @abstractmethod
    def size(self) -> int:
        """Return the minimum number of elements for a possible match."""

    def recognize(self, scanner: Scanner[T]) -> View[T] | None:
        """Recognize this pattern at the scanner cursor.

        Returns:
            The consumed view, or None if the pattern did not match
            (the scanner is left untouched)

        Raises:
            UnexpectedEndOfInput: If the scanner is already exhausted
        """
        return recognize_pattern(self, scanner)


@dataclass(frozen=True, slots=True)
class Literal(Pattern[Any]):
    """Fixed multi-element sequence, e.g. a compound operator.

    ``size()`` is the pattern length: a literal can never match less input.

    Attributes:
        pattern: Elements to match in order (str, bytes or tuple)

    """

    pattern: Sequence[Any]

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Literal pattern must not be empty")

    def matcher(self, data: View[Any]) -> tuple[bool, int]:
        return match_pattern(self.pattern, data)

    def size(self) -> int:
        return len(self.pattern)


@dataclass(frozen=True, slots=True)
class Digits(Pattern[Any]):
    """Run of ASCII decimal digits.

    Declares a minimum size of 0: the actual length is only known after
    scanning, so the hint stays a conservative lower bound.

    """

    def matcher(self, data: View[Any]) -> tuple[bool, int]:
        return match_number(data)

    def size(self) -> int:
        return 0


# The ``::<>`` compound operator
TURBOFISH = Literal("::<>")

DIGITS = Digits()
