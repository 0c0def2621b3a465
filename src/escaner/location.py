"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking cursor positions in scanned
input. Line and column are only meaningful for text-like input (``str``,
``bytes``, ``bytearray``); other element sequences get an offset-only location.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a scanner cursor inside its input.

    ``lineno`` and ``col_offset`` are 1-indexed; ``offset`` is the 0-indexed
    element offset the cursor sits on.

    Attributes:
        offset: Absolute element offset in the input
        lineno: Line number (1-indexed), None for non-text input
        col_offset: Column (1-indexed), None for non-text input

    Examples:
        >>> SourceLocation.from_offset("ab\\ncd", 4)
        SourceLocation(offset=4, lineno=2, col_offset=2)

        >>> str(SourceLocation(offset=7))
        'offset 7'

    """

    offset: int
    lineno: int | None = None
    col_offset: int | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "2:5" or "offset 7"
        """
        if self.lineno is not None and self.col_offset is not None:
            return f"{self.lineno}:{self.col_offset}"
        return f"offset {self.offset}"

    @classmethod
    def from_offset(cls, data: Sequence[Any], offset: int) -> SourceLocation:
        """Compute the location of ``offset`` inside ``data``.

        Uses C-level ``count``/``rfind`` for text input, so the cost is a
        single pass over ``data[:offset]``.

        Args:
            data: The full scanned input
            offset: Element offset (0 <= offset <= len(data))

        Returns:
            SourceLocation with line/column for text input, offset only otherwise
        """
        if isinstance(data, str):
            newline: Any = "\n"
        elif isinstance(data, (bytes, bytearray)):
            newline = b"\n"
        else:
            return cls(offset=offset)

        lineno = data.count(newline, 0, offset) + 1
        last_nl = data.rfind(newline, 0, offset)
        return cls(offset=offset, lineno=lineno, col_offset=offset - last_nl)
