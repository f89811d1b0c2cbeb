"""ASCII character classification and case conversion.

Each function accepts either a character code (an ``int``) or a
one-character string. The predicates only recognise ASCII: code points
outside that range are never letters, digits or printable.
"""

from __future__ import annotations

from typing import overload

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def isalpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def isdigit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def isalnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Return True for a code in the range 0..127."""
    return _code(c) in _ASCII


def isprint(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave others alone."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave others alone."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code