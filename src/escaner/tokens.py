"""Single-element token definitions.

Every Token member is a fixed one-element pattern: it matches with
``match_char`` and always declares a size of 1. Members work directly
with :func:`escaner.recognizer.recognize`.

Usage:
    >>> scanner = Scanner(b"+ 2")
    >>> recognize(Token.PLUS, scanner)
    View(b'+', 0:1)

Thread Safety:
Token is an enum (inherently immutable).

"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from escaner.matchers import match_char
from escaner.recognizer import recognize_pattern

if TYPE_CHECKING:
    from escaner.scanner import Scanner
    from escaner.view import View


class Token(Enum):
    """Single-element tokens, valued by the character they match."""

    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"
    WHITESPACE = " "
    GREATER_THAN = ">"
    LESS_THAN = "<"
    EXCLAMATION = "!"
    QUOTE = "'"
    DOUBLE_QUOTE = '"'
    EQUAL = "="
    PLUS = "+"

    def matcher(self, data: View[Any]) -> tuple[bool, int]:
        return match_char(self.value, data)

    def size(self) -> int:
        return 1

    def recognize(self, scanner: Scanner[Any]) -> View[Any] | None:
        """Recognize this token at the scanner cursor.

        Returns:
            One-element view, or None if the token is not at the cursor

        Raises:
            UnexpectedEndOfInput: If the scanner is already exhausted
        """
        return recognize_pattern(self, scanner)
