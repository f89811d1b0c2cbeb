"""String helpers: number parsing and formatting, splitting, trimming, searching.

Search functions return an index into the text, or ``None`` when there is no
match. Searching for ``"\\0"`` finds the end of the text, so
``strchr(text, "\\0") == len(text)``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import TypeVar

_WHITESPACE = " \n\t\v\r\f"
_DIGITS = "0123456789"
_END = "\0"

T = TypeVar("T")


def _single_char(char: str) -> str:
    if not isinstance(char, str):
        raise TypeError(f"expected a one-character string, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(ch)
    return sign * value


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading ``-`` when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strchr(text: str, char: str) -> int | None:
    """Index of the first occurrence of ``char``; ``"\\0"`` finds the end."""
    _single_char(char)
    if char == _END:
        index = text.find(_END)
        return len(text) if index < 0 else index
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last occurrence of ``char``; ``"\\0"`` finds the end."""
    _single_char(char)
    if char == _END:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a
    missing character counting as 0, or 0 when the compared parts match.
    """
    _non_negative("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_END):
        if a != b:
            return ord(a) - ord(b)
        if a == _END:
            break
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(chars: MutableSequence[T], func: Callable[[int, T], T]) -> None:
    """Replace each element of ``chars`` in place with ``func(index, element)``."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)