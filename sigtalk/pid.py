"""Strict parsing of process identifiers given on the command line."""

from __future__ import annotations

from sigtalk.chars import isdigit
from sigtalk.textops import atoi


class PidError(ValueError):
    """Raised when a process identifier is not in an accepted form."""


def is_numeric(text: str) -> bool:
    """True for an optional '+' followed by one or more ASCII digits.

    A leading '-' is rejected.
    """
    body = text[1:] if text.startswith("+") else text
    if text.startswith("-") or not body:
        return False
    return all(isdigit(ch) for ch in body)


def strict_atoi(text: str) -> int:
    """The integer value of ``text`` when it is numeric, otherwise 0."""
    if is_numeric(text):
        return atoi(text)
    return 0


def parse_pid(text: str) -> int:
    """Parse a server process identifier, raising PidError when it is unusable."""
    pid = strict_atoi(text)
    if pid in (-1, 0):
        raise PidError("Wrong format input for <server_pid>.")
    return pid