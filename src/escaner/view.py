"""Zero-copy views over scanned input.

A View is a read-only window ``[start, stop)`` over a sequence the caller
owns. Scanners hand views to matchers and return them as recognized output,
so recognition never copies the input. Call :meth:`View.materialize` when a
real ``str``/``bytes``/``list`` slice is needed.

A view is valid for as long as the underlying sequence is left unchanged.
Escaner never mutates input; mutating a ``bytearray`` or ``list`` while views
over it are alive is the caller's responsibility.

Thread Safety:
View instances are immutable and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, overload


class View[T](Sequence[T]):
    """Read-only window over a sequence.

    Indexing is relative to ``start``. Indexing a ``bytes``-backed view
    yields ``int`` elements, exactly as ``bytes`` does.

    Usage:
        >>> view = View("1 + 2", 0, 1)
        >>> len(view), view[0], view == "1"
        (1, '1', True)
        >>> view.span
        (0, 1)

    """

    __slots__ = ("_data", "_start", "_stop")

    def __init__(self, data: Sequence[T], start: int = 0, stop: int | None = None) -> None:
        """Create a view over ``data[start:stop]``.

        Args:
            data: The underlying sequence (borrowed, never copied)
            start: Absolute start index (inclusive)
            stop: Absolute stop index (exclusive), defaults to ``len(data)``

        Raises:
            ValueError: If the bounds do not satisfy 0 <= start <= stop <= len(data)
        """
        length = len(data)
        if stop is None:
            stop = length
        if not 0 <= start <= stop <= length:
            raise ValueError(f"Invalid view bounds [{start}:{stop}] over {length} elements")
        self._data = data
        self._start = start
        self._stop = stop

    @property
    def data(self) -> Sequence[T]:
        """The full underlying sequence."""
        return self._data

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def span(self) -> tuple[int, int]:
        """Absolute ``(start, stop)`` indices into :attr:`data`."""
        return self._start, self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                # Strided access cannot be expressed as a window
                return self.materialize()[index]
            stop = max(start, stop)
            return View(self._data, self._start + start, self._start + stop)

        length = self._stop - self._start
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("view index out of range")
        return self._data[self._start + index]

    def __iter__(self) -> Iterator[T]:
        data = self._data
        for i in range(self._start, self._stop):
            yield data[i]

    def __eq__(self, other: object) -> bool:
        # Covers other views as well as str, bytes, tuple and list
        if isinstance(other, Sequence):
            if len(self) != len(other):
                return False
            return all(a == b for a, b in zip(self, other, strict=True))
        return NotImplemented

    def __hash__(self) -> int:
        # Element tuple, so equal views over different sequence types hash alike
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"View({self.materialize()!r}, {self._start}:{self._stop})"

    def startswith(self, prefix: Sequence[T]) -> bool:
        """Check whether the view starts with ``prefix``.

        Uses the C-level ``startswith`` for ``str``/``bytes`` input with a
        prefix of the same kind, falling back to element comparison.

        Args:
            prefix: Sequence of elements to compare against

        Returns:
            True if the first ``len(prefix)`` elements equal ``prefix``
        """
        data = self._data
        if isinstance(data, str) and isinstance(prefix, str):
            return data.startswith(prefix, self._start, self._stop)
        if isinstance(data, (bytes, bytearray)) and isinstance(prefix, (bytes, bytearray)):
            return data.startswith(prefix, self._start, self._stop)

        size = len(prefix)
        if size > len(self):
            return False
        start = self._start
        return all(data[start + i] == prefix[i] for i in range(size))

    def materialize(self) -> Sequence[T]:
        """Copy the viewed elements into a slice of the underlying type."""
        return self._data[self._start : self._stop]

    def text(self, encoding: str = "utf-8") -> str:
        """Return the viewed elements as text.

        Args:
            encoding: Codec used when the view is over bytes

        Returns:
            The viewed text

        Raises:
            UnicodeDecodeError: If byte input is not valid in ``encoding``
            TypeError: If the view is over a non-text sequence
        """
        value: Any = self.materialize()
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode(encoding)
        raise TypeError(f"Cannot convert a view over {type(self._data).__name__} to text")
