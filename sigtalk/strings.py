"""C-style string queries and copies on Python strings.

Strings are read the way a NUL-terminated buffer is: a ``"\\0"`` inside
a string ends it, and anything after it is ignored. Positions are
returned as indices, with None where nothing is found.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` slots, one kept for the NUL.

    Returns the text that fits and the full length of ``src``, so a
    truncation shows as a length of at least ``dstsize``.
    """
    _check_size(dstsize, "dstsize")
    text = _cstr(src)
    copied = text[: dstsize - 1] if dstsize else ""
    return copied, len(text)


def strlcat(dst: Optional[str], src: str, dstsize: int) -> Tuple[Optional[str], int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` slots.

    Returns the resulting text and the length the full result would
    have had. When ``dstsize`` is zero or smaller than ``dst``, ``dst``
    is left as it is and the length is ``len(src) + dstsize``.
    """
    _check_size(dstsize, "dstsize")
    tail = _cstr(src)
    if dst is None:
        if dstsize == 0:
            return None, len(tail)
        raise TypeError("strlcat needs a destination when dstsize is not zero")
    head = _cstr(dst)
    if dstsize == 0 or dstsize < len(head):
        return head, len(tail) + dstsize
    room = max(0, dstsize - 1 - len(head))
    return head + tail[:room], len(head) + len(tail)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    _check_size(n, "n")
    if n == 0:
        return 0
    a_text, b_text = _cstr(s1), _cstr(s2)
    for i in range(n):
        a = ord(a_text[i]) if i < len(a_text) else 0
        b = ord(b_text[i]) if i < len(b_text) else 0
        if a != b or a == 0 or i == n - 1:
            return a - b
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives the string's length."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives the string's length."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack)[:length].find(target)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s`` up to its terminating NUL."""
    return _cstr(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if s is None:
        return None
    _check_size(start, "start")
    _check_size(length, "length")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]