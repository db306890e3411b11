"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. Classification returns a bool. Case conversion
returns a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return 48 <= code <= 57


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    code = _code(c)
    return 0 <= code <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    code = _code(c)
    return 32 <= code <= 126


def toupper(c: CharLike) -> CharLike:
    """Convert an ASCII lower-case letter to upper case; leave others alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Convert an ASCII upper-case letter to lower case; leave others alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code