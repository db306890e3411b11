"""Building, splitting and converting strings."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from sigtalk.strings import _cstr

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
_LONG_BITS = 64
_SPACES = frozenset("\t\n\v\f\r ")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits, wrapping on overflow."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return _cstr(s2)
    if s2 is None:
        return _cstr(s1)
    return _cstr(s1) + _cstr(s2)


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    text = _cstr(s)
    if charset is None:
        return text
    chars = _cstr(charset)
    return text.strip(chars) if chars else text


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if s is None:
        return None
    if len(sep) != 1:
        raise TypeError(f"separator must be a single character, got {sep!r}")
    return [word for word in _cstr(s).split(sep) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading white space.

    Stops at the first non-digit. A value that overflows a 64-bit long
    gives -1 when positive and 0 when negative; anything else wraps to a
    32-bit int.
    """
    s = _cstr(text)
    i = 0
    while i < len(s) and s[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < len(s) and "0" <= s[i] <= "9":
        value = _wrap(value * 10 + ord(s[i]) - 48, _LONG_BITS)
        if value < 0:
            return -1 if sign == 1 else 0
        i += 1
    return _wrap(value * sign, 32)


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(s)))


Element = Union[str, int]


def striteri(
    s: Optional[MutableSequence[Element]],
    f: Optional[Callable[[int, Element], Optional[Element]]],
) -> None:
    """Call ``f(index, element)`` on each element of ``s`` up to a NUL, in place.

    ``s`` is a mutable sequence such as a list of characters or a
    bytearray. Where ``f`` returns something other than None, that value
    replaces the element.
    """
    if s is None or f is None:
        return
    for i, item in enumerate(s):
        if item == "\0" or item == 0:
            break
        result = f(i, item)
        if result is not None:
            s[i] = result