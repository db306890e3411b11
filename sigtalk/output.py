"""A small printf-style formatter and stream writers.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%p``. Any other character after ``%`` is written
as it is, so ``%%`` gives a single percent sign. Integer arguments are
read the way a C variadic call reads them: ``%d`` wraps to a 32-bit
signed int, ``%u`` and ``%x`` to a 32-bit unsigned int, ``%p`` to a
64-bit unsigned value.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from sigtalk.strings import _cstr
from sigtalk.textops import _wrap

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF

CharLike = Union[int, str]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    if not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec not in "csdiuxXp":
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return "(null)" if value is None else _cstr(str(value))
    if spec in "di":
        return str(_wrap(_as_int(value, spec), 32))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT_MASK)
    if spec in "xX":
        return format(_as_int(value, spec) & _UINT_MASK, spec)
    address = 0 if value is None else _as_int(value, spec)
    return "0x" + format(address & _POINTER_MASK, "x")


def format_string(fmt: str, *args: Any) -> str:
    """The text that ``printf`` would write for ``fmt`` and ``args``.

    Raises ValueError when a conversion has no argument left to consume.
    Extra arguments are ignored.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(_cstr(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if not spec:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def printf(fmt: str, *args: Any, out: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``out`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = _stream(out)
    stream.write(text)
    stream.flush()
    return len(text)


def putchar_fd(c: CharLike, out: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _stream(out).write(_as_char(c))


def putstr_fd(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write a string up to its NUL; nothing is written for None."""
    if s is None:
        return
    _stream(out).write(_cstr(s))


def putendl_fd(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; nothing is written for None."""
    if s is None:
        return
    _stream(out).write(_cstr(s) + "\n")


def putnbr_fd(n: int, out: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``n`` read as a 32-bit signed int."""
    _stream(out).write(str(_wrap(_as_int(n, "d"), 32)))