"""Build structured values from a scanner.

A visitor is a type that knows how to assemble itself from a sequence of
:func:`~escaner.recognizer.recognize` calls. Visitors compose: a visitor's
``accept`` may call other visitors' ``accept``.

Example, parsing ``"1 + 2 = 3"``:

    @dataclass
    class Addition:
        lhs: int
        rhs: int
        result: int

        @classmethod
        def accept(cls, scanner: Scanner[int]) -> Addition:
            lhs = Number.accept(scanner).value
            recognize(Token.WHITESPACE, scanner)
            recognize(Token.PLUS, scanner)
            recognize(Token.WHITESPACE, scanner)
            rhs = Number.accept(scanner).value
            recognize(Token.WHITESPACE, scanner)
            recognize(Token.EQUAL, scanner)
            recognize(Token.WHITESPACE, scanner)
            return cls(lhs, rhs, Number.accept(scanner).value)

    addition = parse(Addition, b"1 + 2 = 3", complete=True)

Thread Safety:
    Visitors hold no shared state. Each ``parse`` call creates its own scanner.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

from escaner.errors import ConversionError, UnexpectedToken
from escaner.patterns import DIGITS
from escaner.recognizer import recognize
from escaner.scanner import Scanner
from escaner.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Visitor[T](Protocol):
    """A type that can build itself from a scanner."""

    @classmethod
    def accept(cls, scanner: Scanner[T]) -> Self:
        """Consume input from ``scanner`` and return a new instance.

        Raises:
            EscanerError: If the input does not have the expected shape
        """
        ...


@dataclass(frozen=True, slots=True)
class Number:
    """Unsigned decimal integer literal.

    Attributes:
        value: The parsed integer

    """

    value: int

    @classmethod
    def accept(cls, scanner: Scanner[Any]) -> Number:
        position = scanner.current_position()
        raw = recognize(DIGITS, scanner)
        try:
            return cls(int(raw.text()))
        except (UnicodeDecodeError, TypeError, ValueError) as e:
            raise ConversionError(
                f"Malformed number {raw!r}",
                position,
                location=scanner.error_location(position),
            ) from e


def parse[V: Visitor[Any]](
    visitor: type[V],
    data: Sequence[Any],
    *,
    complete: bool = False,
) -> V:
    """Parse ``data`` into a value of type ``visitor``.

    Args:
        visitor: Visitor type to build
        data: Input sequence
        complete: Require the visitor to consume the whole input

    Returns:
        The built value

    Raises:
        UnexpectedToken: If ``complete`` is set and input remains
        EscanerError: Any failure raised by the visitor
    """
    scanner = Scanner(data)
    value = visitor.accept(scanner)
    if complete and not scanner.is_empty():
        raise UnexpectedToken(
            scanner.current_position(),
            found=scanner.peek(),
            expected="end of input",
            location=scanner.error_location(),
        )
    logger.debug(
        "Parsed %s: consumed %d of %d elements",
        visitor.__name__,
        scanner.current_position(),
        len(data),
    )
    return value
