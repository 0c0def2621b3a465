"""Exception classes for Escaner.

Provides standardized exceptions for error handling throughout Escaner.

Matchers never raise: they report ``(False, 0)``. Soft mismatches become
hard errors only in :func:`escaner.recognizer.recognize`, which raises
:class:`UnexpectedToken` or :class:`UnexpectedEndOfInput`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from escaner.location import SourceLocation


class EscanerError(Exception):
    """Base exception for all Escaner errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(EscanerError):
    """Error while recognizing input.

    Raised when a recognition attempt fails for good. Carries the cursor
    position at which the failure happened.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize parse error with optional position.

        Args:
            message: Error description
            position: Cursor offset where the error occurred (0-indexed)
            location: Line/column location, when known
        """
        self.message = message
        self.position = position
        self.location = location

        prefix = ""
        if location is not None:
            prefix = f"{location}: "
        elif position is not None:
            prefix = f"offset {position}: "

        super().__init__(f"{prefix}{message}")


class UnexpectedEndOfInput(ParseError):
    """Input ended before a pattern could be recognized.

    Raised when the scanner is exhausted, or when fewer elements remain
    than the pattern's declared minimum size.
    """

    def __init__(
        self,
        position: int | None = None,
        *,
        expected_size: int | None = None,
        remaining: int | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize end-of-input error.

        Args:
            position: Cursor offset
            expected_size: Minimum size the pattern declared
            remaining: Elements left in the scanner
            location: Line/column location, when known
        """
        self.expected_size = expected_size
        self.remaining = remaining

        message = "unexpected end of input"
        if expected_size is not None and remaining is not None:
            message += f" (need {expected_size}, {remaining} left)"
        super().__init__(message, position, location)


class UnexpectedToken(ParseError):
    """Input was present but did not match the expected pattern."""

    def __init__(
        self,
        position: int | None = None,
        *,
        found: Any = None,
        expected: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize unexpected-token error.

        Args:
            position: Cursor offset
            found: Element at the cursor, None when input is exhausted
            expected: Human-readable description of what was expected
            location: Line/column location, when known
        """
        self.found = found
        self.expected = expected

        message = "unexpected token"
        if found is not None:
            message += f" {found!r}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message, position, location)


class ConversionError(ParseError):
    """A recognized slice could not be converted into a value.

    Wraps downstream failures such as malformed numeric text or invalid
    UTF-8. The original exception is chained as ``__cause__``.
    """

    pass


class ScannerStateError(EscanerError):
    """The scanner was asked to do something that breaks its invariants.

    Raised by :meth:`escaner.scanner.Scanner.bump_by` when advancing would
    move the cursor backwards, past the end, or off an empty scanner.
    """

    pass


class MatcherContractError(EscanerError):
    """A matcher reported a consumed length it could not have consumed."""

    def __init__(self, matcher: object, consumed: int, available: int) -> None:
        """Initialize matcher contract error.

        Args:
            matcher: The offending matcher
            consumed: Consumed length it reported
            available: Elements it was given
        """
        self.matcher = matcher
        self.consumed = consumed
        self.available = available
        super().__init__(
            f"Matcher {matcher!r} reported {consumed} consumed elements "
            f"but only {available} were available"
        )
