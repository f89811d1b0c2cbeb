"""Byte-buffer helpers over mutable buffers such as ``bytearray``.

Strings handled by :func:`strlcpy` and :func:`strlcat` follow the
NUL-terminated convention: a string ends at its first zero byte, or at the
end of the buffer if it has none.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def _string_length(data: Bytes, limit: int | None = None) -> int:
    """Length of the NUL-terminated string at the start of ``data``."""
    view = bytes(data if limit is None else data[:limit])
    end = view.find(0)
    return len(view) if end < 0 else end


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> Buffer:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Difference of the first differing byte pair in the first ``n`` bytes, or 0."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: Bytes, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within one buffer.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def strlcpy(dest: Buffer, src: Bytes, size: int) -> int:
    """Copy the string ``src`` into ``dest`` of capacity ``size``.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated
    when ``size`` is positive. Returns the length of ``src``.
    """
    if size < 0 or size > len(dest):
        raise ValueError(f"size {size} does not fit a buffer of length {len(dest)}")
    length = _string_length(src)
    if size == 0:
        return length
    copied = min(length, size - 1)
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return length


def strlcat(dest: Buffer, src: Bytes, size: int) -> int:
    """Append the string ``src`` to the string in ``dest`` of capacity ``size``.

    Returns the length the combined string would have had without
    truncation: the length of ``dest`` (capped at ``size``) plus that of
    ``src``.
    """
    if size < 0 or size > len(dest):
        raise ValueError(f"size {size} does not fit a buffer of length {len(dest)}")
    src_length = _string_length(src)
    dest_length = _string_length(dest, size)
    if dest_length >= size:
        return dest_length + src_length
    copied = min(size - dest_length - 1, src_length)
    dest[dest_length:dest_length + copied] = bytes(src[:copied])
    dest[dest_length + copied] = 0
    return dest_length + src_length