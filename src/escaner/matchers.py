"""Reusable matcher functions.

Each function takes the remaining input and returns ``(matched, consumed)``.
They accept a :class:`~escaner.view.View` or any plain sequence, and work
for both text and byte input: a one-character ``str`` expectation matches
the equivalent ``int`` element of ``bytes`` input.

No regex: every matcher scans forward element by element, so the cost is
bounded by the number of elements it consumes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from escaner.view import View

# Both text digits and their byte values, so one set serves str and bytes
_ASCII_DIGITS: frozenset[Any] = frozenset("0123456789") | frozenset(b"0123456789")


def match_char(expected: Any, data: Sequence[Any]) -> tuple[bool, int]:
    """Match a single element at the front of ``data``.

    Args:
        expected: Element to match; a one-character str also matches the
            corresponding byte value
        data: Remaining input

    Returns:
        ``(True, 1)`` if the first element equals ``expected``, else ``(False, 0)``

    Example:
        >>> match_char("+", b"+1")
        (True, 1)
        >>> match_char("+", "")
        (False, 0)
    """
    if not data:
        return False, 0
    first = data[0]
    if isinstance(first, int) and isinstance(expected, str):
        if len(expected) != 1:
            return False, 0
        expected = ord(expected)
    if first == expected:
        return True, 1
    return False, 0


def match_number(data: Sequence[Any]) -> tuple[bool, int]:
    """Match a run of ASCII decimal digits at the front of ``data``.

    Returns:
        ``(True, n)`` for a run of ``n >= 1`` digits, ``(False, 0)`` if
        ``data`` does not start with a digit
    """
    consumed = 0
    for element in data:
        if not isinstance(element, (str, int)) or element not in _ASCII_DIGITS:
            break
        consumed += 1
    return consumed > 0, consumed


def match_pattern(pattern: Sequence[Any], data: Sequence[Any]) -> tuple[bool, int]:
    """Match a fixed sequence of elements at the front of ``data``.

    A ``str`` pattern is UTF-8 encoded when ``data`` holds byte values.

    Args:
        pattern: Elements to match, in order
        data: Remaining input

    Returns:
        ``(True, len(pattern))`` on match, ``(False, 0)`` otherwise,
        including when ``data`` is shorter than the pattern
    """
    if len(data) < len(pattern):
        return False, 0
    if not pattern:
        return False, 0
    if isinstance(pattern, str) and isinstance(data[0], int):
        pattern = pattern.encode("utf-8")
        if len(data) < len(pattern):
            return False, 0

    view = data if isinstance(data, View) else View(data)
    if view.startswith(pattern):
        return True, len(pattern)
    return False, 0
