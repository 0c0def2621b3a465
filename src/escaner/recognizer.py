"""Recognition protocol and the recognize operation.

A recognizable attempts to recognize itself at the scanner cursor:

- returns a value and advances the cursor by exactly what it consumed,
- returns None and leaves the cursor untouched when it does not match,
- raises an :class:`~escaner.errors.EscanerError` on hard failure.

:func:`recognize` is the one place where "did not match" turns into an
:class:`~escaner.errors.UnexpectedToken` error. Below it, a mismatch is
ordinary data.

Example:
    >>> scanner = Scanner("::<>b")
    >>> recognize(TURBOFISH, scanner)
    View('::<>', 0:4)
    >>> scanner.remaining()
    View('b', 4:5)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from escaner.config import get_scan_config
from escaner.errors import UnexpectedEndOfInput, UnexpectedToken
from escaner.utils.logger import get_logger
from escaner.view import View

if TYPE_CHECKING:
    from escaner.matcher import SizedMatch
    from escaner.scanner import Scanner

logger = get_logger(__name__)


@runtime_checkable
class Recognizable[T, V](Protocol):
    """Anything that can recognize itself against a scanner.

    Recognizables compose sequentially: a higher-level recognizable calls
    lower-level ones in order. There is no backtracking; once a step fails
    the whole chain fails.

    """

    def size(self) -> int:
        """Return the minimum number of elements for a possible match."""
        ...

    def recognize(self, scanner: Scanner[T]) -> V | None:
        """Recognize at the scanner cursor, consuming on success."""
        ...


def recognize_pattern[T](pattern: SizedMatch[T], scanner: Scanner[T]) -> View[T] | None:
    """Standard recognition for any matcher with a size hint.

    Args:
        pattern: Object implementing ``matcher`` and ``size``
        scanner: Scanner to recognize against

    Returns:
        View over the consumed elements, or None on mismatch

    Raises:
        UnexpectedEndOfInput: If the scanner is already exhausted
    """
    position = scanner.current_position()
    if scanner.is_empty():
        raise UnexpectedEndOfInput(
            position,
            expected_size=pattern.size(),
            remaining=0,
            location=scanner.error_location(),
        )

    matched, consumed = scanner.try_match(pattern)
    if get_scan_config().trace:
        logger.debug(
            "Recognize %s at %d: matched=%s consumed=%d", pattern, position, matched, consumed
        )
    if not matched:
        return None

    scanner.bump_by(consumed)
    return View(scanner.data(), position, position + consumed)


def recognize[T, V](recognizable: Recognizable[T, V], scanner: Scanner[T]) -> V:
    """Recognize ``recognizable`` at the cursor or fail.

    Checks the declared minimum size against the remaining input first;
    when too little input is left the recognizable is never invoked.

    Args:
        recognizable: What to recognize
        scanner: Scanner to recognize against

    Returns:
        The recognized value

    Raises:
        UnexpectedEndOfInput: If fewer elements remain than the minimum size,
            or the recognizable reports the scanner as exhausted
        UnexpectedToken: If the recognizable did not match
        EscanerError: Any lower-level failure, propagated unchanged
    """
    size = recognizable.size()
    remaining = len(scanner.remaining())
    if size > remaining:
        if get_scan_config().trace:
            logger.debug(
                "Recognize %s at %d: need %d, %d left",
                recognizable,
                scanner.current_position(),
                size,
                remaining,
            )
        raise UnexpectedEndOfInput(
            scanner.current_position(),
            expected_size=size,
            remaining=remaining,
            location=scanner.error_location(),
        )

    value = recognizable.recognize(scanner)
    if value is None:
        raise UnexpectedToken(
            scanner.current_position(),
            found=scanner.peek(),
            expected=str(recognizable),
            location=scanner.error_location(),
        )
    return value
