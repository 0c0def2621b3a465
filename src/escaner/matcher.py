"""Matcher and size-hint contracts.

Two capabilities, kept separate so a cheap length pre-check can run
without invoking a (possibly costlier) matcher:

- :class:`Match`: "does a pattern start at the front of this view, and how
  many elements does it consume?"
- :class:`MatchSize`: "what is the shortest input this could match?"

Minimum size is a lower bound only. A digit run declares 0 yet consumes
at least one element on success; never assume size equals consumption.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from escaner.view import View


@runtime_checkable
class Match[T](Protocol):
    """Pure predicate-with-length over the front of a view.

    Implementations must:
        - have no side effects (they may be run speculatively)
        - return ``(False, 0)`` for input shorter than the pattern,
          without indexing past the end
        - on match, return the exact number of consumed elements,
          never more than ``len(data)``
        - report an empty variable-length run as ``(False, 0)``

    """

    def matcher(self, data: View[T]) -> tuple[bool, int]:
        """Match against the front of ``data``."""
        ...


@runtime_checkable
class MatchSize(Protocol):
    """Declares the minimum input length a matcher needs."""

    def size(self) -> int:
        """Return the minimum number of elements for a possible match."""
        ...


@runtime_checkable
class SizedMatch[T](Match[T], MatchSize, Protocol):
    """A matcher that also declares its minimum size."""
