"""Send a text message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Iterable, Optional, Sequence, Union

from sigtalk.encoding import encode_byte, encode_message
from sigtalk.output import printf
from sigtalk.pid import PidError, parse_pid

DEFAULT_DELAY = 30e-6
"""Pause after each signal, in seconds, so the server keeps up."""

KillFunc = Callable[[int, int], object]

_WRONG_FORMAT = "\033[91mError: wrong format.\033[0m\n"
_USAGE = "\033[33mTry: ./client <server_pid> <message>\033[0m\n"
_BAD_PID = "\033[91mWrong format input for <server_pid>.\033[0m\n"
_ACKNOWLEDGED = "\n\033[32mMessage received successfully!\033[0m ✅\n"


def _send_bits(pid: int, bits: Iterable[int], delay: float, kill: Optional[KillFunc]) -> None:
    send = os.kill if kill is None else kill
    for bit in bits:
        send(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        if delay > 0:
            time.sleep(delay)


def send_byte(
    pid: int,
    value: int,
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> None:
    """Signal the eight bits of ``value`` to ``pid``, most significant first.

    A 1 bit is sent as SIGUSR1, a 0 bit as SIGUSR2.
    """
    _send_bits(pid, encode_byte(value), delay, kill)


def send_message(
    pid: int,
    message: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> None:
    """Signal every byte of ``message`` to ``pid``, then a terminating NUL."""
    _send_bits(pid, encode_message(message), delay, kill)


def _on_acknowledge(signum: int, frame: object) -> None:
    if signum == signal.SIGUSR1:
        printf(_ACKNOWLEDGED)


def _run(argv: Optional[Sequence[str]]) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf(_WRONG_FORMAT)
        printf(_USAGE)
        return 1
    try:
        pid = parse_pid(args[0])
    except PidError:
        printf(_BAD_PID)
        return 1
    try:
        send_message(pid, args[1])
    except OSError as exc:
        printf("\033[91mCould not signal process %d: %s\033[0m\n", pid, str(exc))
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send ``argv[1]`` to the server whose process id is ``argv[0]``."""
    return _run(argv)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Like ``main``, and report the server's acknowledgement when it arrives."""
    signal.signal(signal.SIGUSR1, _on_acknowledge)
    return _run(argv)


if __name__ == "__main__":
    sys.exit(main())