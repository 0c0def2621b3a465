"""Position-tracking scanner over a borrowed input sequence.

The scanner is the only mutable object in the recognition engine: a cursor
over an input it borrows for its whole lifetime. The cursor never moves
backwards and never passes the end of input.

Thread Safety:
Scanner instances are single-use. Create one per input and parse session.
All state is instance-local; do not share a scanner between threads.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from escaner.config import get_scan_config
from escaner.errors import MatcherContractError, ScannerStateError
from escaner.location import SourceLocation
from escaner.view import View

if TYPE_CHECKING:
    from escaner.matcher import Match

type MatcherLike[T] = Match[T] | Callable[[View[T]], tuple[bool, int]]


class Scanner[T]:
    """Cursor over a contiguous input sequence.

    Works for any randomly indexable sequence: ``str`` scans characters,
    ``bytes`` scans byte values, a ``tuple`` of tokens scans tokens.

    Usage:
        >>> scanner = Scanner("12a")
        >>> scanner.try_match(Digits())
        (True, 2)
        >>> scanner.current_position()  # try_match never moves the cursor
        0
        >>> scanner.bump_by(2)
        >>> scanner.remaining()
        View('a', 2:3)

    """

    __slots__ = ("_data", "_data_len", "_pos")

    def __init__(self, data: Sequence[T]) -> None:
        """Initialize scanner at the start of ``data``.

        Args:
            data: Input sequence (borrowed, never copied or mutated)
        """
        self._data = data
        self._data_len = len(data)
        self._pos = 0

    def __repr__(self) -> str:
        return f"Scanner(position={self._pos}, length={self._data_len})"

    def data(self) -> Sequence[T]:
        """Return the full original input."""
        return self._data

    def current_position(self) -> int:
        """Return the cursor offset."""
        return self._pos

    def remaining(self) -> View[T]:
        """Return a view from the cursor to the end of input.

        Complexity: O(1), no elements are copied.
        """
        return View(self._data, self._pos, self._data_len)

    def is_empty(self) -> bool:
        """Check whether the cursor sits at the end of input."""
        return self._pos == self._data_len

    def peek(self) -> T | None:
        """Return the element at the cursor, or None at end of input."""
        if self._pos >= self._data_len:
            return None
        return self._data[self._pos]

    def bump_by(self, n: int) -> None:
        """Advance the cursor by ``n`` elements.

        Must not be called on an empty scanner, even with ``n == 0``.

        Args:
            n: Number of elements to advance

        Raises:
            ScannerStateError: If the scanner is empty, ``n`` is negative,
                or the cursor would move past the end of input. The cursor
                is unchanged in every case.
        """
        if self._pos == self._data_len:
            raise ScannerStateError(f"Cannot advance an exhausted scanner (position {self._pos})")
        if n < 0:
            raise ScannerStateError(f"Cannot move the cursor backwards (n={n})")
        if self._pos + n > self._data_len:
            raise ScannerStateError(
                f"Cannot advance by {n} at position {self._pos}: "
                f"only {self._data_len - self._pos} elements remain"
            )
        self._pos += n

    def try_match(self, matcher: MatcherLike[T]) -> tuple[bool, int]:
        """Run a matcher against the remaining input without consuming it.

        Args:
            matcher: An object with a ``matcher(data)`` method, or a plain
                callable taking the remaining view

        Returns:
            ``(True, consumed)`` on match, ``(False, 0)`` otherwise

        Raises:
            MatcherContractError: If contract checking is enabled and the
                matcher reports more elements than it was given
        """
        data = self.remaining()
        match_fn = getattr(matcher, "matcher", matcher)
        matched, consumed = match_fn(data)
        if not matched:
            return False, 0

        if get_scan_config().check_contracts and not 0 <= consumed <= len(data):
            raise MatcherContractError(matcher, consumed, len(data))
        return True, consumed

    def location(self) -> SourceLocation:
        """Return the line/column location of the cursor.

        Complexity: O(position) for text input.
        """
        return SourceLocation.from_offset(self._data, self._pos)

    def error_location(self, offset: int | None = None) -> SourceLocation | None:
        """Return the location of ``offset`` if error locations are enabled.

        Args:
            offset: Element offset, defaults to the cursor
        """
        if not get_scan_config().track_locations:
            return None
        if offset is None:
            offset = self._pos
        return SourceLocation.from_offset(self._data, offset)
