"""Receive messages sent one bit per signal and print them."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from typing import Callable, List, Optional, Sequence, TextIO

from sigtalk.encoding import Event, EventKind, MessageDecoder
from sigtalk.output import format_string, printf

KillFunc = Callable[[int, int], object]

_NEW_CLIENT = "\n\033[33mNew client detected. Restarting...\033[0m\n"
_FULLY_RECEIVED = "\n\033[32mMessage fully received! \033[0m✅"
_WRONG_FORMAT = "\033[91mError: wrong format.\033[0m\n"
_USAGE = "\033[33mTry: ./server\033[0m\n"


class Server:
    """Turns incoming SIGUSR1/SIGUSR2 signals into printed text.

    With ``acknowledge`` set, the sender is signalled with SIGUSR1 once
    its whole message has arrived.
    """

    def __init__(
        self,
        acknowledge: bool = False,
        out: Optional[TextIO] = None,
        kill: Optional[KillFunc] = None,
    ) -> None:
        self.acknowledge = acknowledge
        self._out = out
        self._kill = kill
        self._decoder = MessageDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _write(self, text: str) -> None:
        if not text:
            return
        stream = sys.stdout if self._out is None else self._out
        stream.write(text)
        stream.flush()

    def _signal_sender(self, sender: int) -> None:
        send = os.kill if self._kill is None else self._kill
        send(sender, signal.SIGUSR1)

    def handle(self, signum: int, sender: int) -> List[Event]:
        """Take one signal from ``sender``, print what it completes and return the events."""
        if signum not in (signal.SIGUSR1, signal.SIGUSR2):
            raise ValueError(f"unexpected signal {signum}")
        events = self._decoder.feed(sender, signum == signal.SIGUSR1)
        for event in events:
            if event.kind is EventKind.NEW_CLIENT:
                self._text.reset()
                self._write(_NEW_CLIENT)
            elif event.kind is EventKind.CHARACTER:
                self._write(self._text.decode(bytes([event.value])))
            else:
                self._write(self._text.decode(b"", final=True))
                if self.acknowledge:
                    self._write(_FULLY_RECEIVED)
                    self._signal_sender(event.sender)
                else:
                    self._write("\n")
        return events

    def banner(self, pid: Optional[int] = None) -> None:
        """Print the process id to signal and the waiting notice."""
        if pid is None:
            pid = os.getpid()
        self._write(format_string("\033[36mPID\033[0m \033[36m->\033[0m %d\n", pid))
        self._write("\033[94mWaiting for a message...\033[0m\n")

    def serve_forever(self) -> None:
        """Wait for signals and handle each one until interrupted."""
        if not hasattr(signal, "sigwaitinfo"):
            raise RuntimeError("this platform cannot report which process sent a signal")
        watched = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _run(argv: Optional[Sequence[str]], acknowledge: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        printf(_WRONG_FORMAT)
        printf(_USAGE)
        return 1
    server = Server(acknowledge=acknowledge)
    server.banner()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 130
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server, printing each message as it arrives."""
    return _run(argv, acknowledge=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server and acknowledge each completed message to its sender."""
    return _run(argv, acknowledge=True)


if __name__ == "__main__":
    sys.exit(main())