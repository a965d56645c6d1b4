"""Classic C-style string and memory routines over Python strings and buffers.

Text functions treat a NUL character as the end of the string, as the C
routines do. Memory functions work on bytes-like objects, and the ones that
write need a mutable buffer such as a bytearray.
"""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "strlen",
    "strncpy",
    "strncat",
    "strcmp",
    "strncmp",
    "strstr",
    "tokenize",
    "memcmp",
    "memmove",
    "memset",
    "reverse",
]


def _cstr(text: str) -> str:
    """Return the part of ``text`` before its first NUL character."""
    return text.partition("\0")[0]


def _check_count(count: int, name: str = "n") -> None:
    if count < 0:
        raise ValueError(f"{name} must not be negative, got {count}")


def _signed(byte: int) -> int:
    """Interpret a byte as a signed char."""
    return byte - 256 if byte > 127 else byte


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_cstr(s))


def strncpy(dest: str, src: str, n: int) -> str:
    """Copy at most ``n`` characters of ``src`` over the start of ``dest``.

    If ``src`` is shorter than ``n`` the rest of the copied area is
    NUL-filled, so the result is ``src`` itself. Otherwise the first ``n``
    characters of ``dest`` are replaced and the remainder of ``dest`` is kept.
    """
    _check_count(n)
    copied = _cstr(src)[:n]
    if len(copied) < n:
        return copied
    return copied + _cstr(dest)[n:]


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` to ``dest``."""
    _check_count(n)
    return _cstr(dest) + _cstr(src)[:n]


def strcmp(a: str, b: str) -> int:
    """Compare two strings character by character.

    Returns the difference of the first pair of differing characters, or 0.
    Only the common length is examined, so a string and its prefix compare
    equal.
    """
    for x, y in zip(_cstr(a), _cstr(b)):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, as :func:`strcmp`."""
    _check_count(n)
    return strcmp(_cstr(a)[:n], _cstr(b)[:n])


def strstr(haystack: str, needle: str) -> str | None:
    """Return the tail of ``haystack`` starting at ``needle``, or None.

    An empty ``needle`` matches at the start.
    """
    haystack, needle = _cstr(haystack), _cstr(needle)
    index = haystack.find(needle)
    return haystack[index:] if index >= 0 else None


def tokenize(text: str, delimiters: str) -> Iterator[str]:
    """Split ``text`` at every character found in ``delimiters``.

    Adjacent delimiters, and delimiters at either end, produce empty tokens;
    the text after the last delimiter is always the final token.
    """
    separators = set(_cstr(delimiters))
    token: list[str] = []
    for ch in _cstr(text):
        if ch in separators:
            yield "".join(token)
            token.clear()
        else:
            token.append(ch)
    yield "".join(token)


def memcmp(a: bytes, b: bytes, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers as signed chars."""
    _check_count(count, "count")
    if count > len(a) or count > len(b):
        raise ValueError("count exceeds the length of a buffer")
    for x, y in zip(a[:count], b[:count]):
        if x != y:
            return _signed(x) - _signed(y)
    return 0


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled; the buffer is changed in place and
    returned.
    """
    _check_count(count, "count")
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if dest + count > len(buffer) or src + count > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    buffer[dest : dest + count] = bytes(buffer[src : src + count])
    return buffer


def memset(buffer: bytearray, value: int | str | bytes, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value``.

    ``value`` may be an int, of which only the low byte is used, or a single
    character. The buffer is changed in place and returned.
    """
    _check_count(count, "count")
    if count > len(buffer):
        raise ValueError("count exceeds the length of the buffer")
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise ValueError("value must be a single character")
        value = ord(value)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return _cstr(text)[::-1]