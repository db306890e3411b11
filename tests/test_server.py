import io
import signal

import pytest

from sigtalk.encoding import EventKind, encode_message
from sigtalk.server import Server, bonus_main, main

NEW_CLIENT = "\n\033[33mNew client detected. Restarting...\033[0m\n"
FULLY_RECEIVED = "\n\033[32mMessage fully received! \033[0m✅"


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, signum):
        self.calls.append((pid, signum))


def feed(server, sender, bits):
    events = []
    for bit in bits:
        signum = signal.SIGUSR1 if bit else signal.SIGUSR2
        events.extend(server.handle(signum, sender))
    return events


def make(acknowledge=False):
    out = io.StringIO()
    rec = Recorder()
    return Server(acknowledge=acknowledge, out=out, kill=rec), out, rec


def test_plain_message():
    server, out, rec = make()
    feed(server, 42, encode_message("hi"))
    assert out.getvalue() == NEW_CLIENT + "hi\n"
    assert rec.calls == []


def test_acknowledged_message():
    server, out, rec = make(acknowledge=True)
    feed(server, 42, encode_message("hi"))
    assert out.getvalue() == NEW_CLIENT + "hi" + FULLY_RECEIVED
    assert rec.calls == [(42, signal.SIGUSR1)]


def test_same_sender_announced_once():
    server, out, _ = make()
    feed(server, 7, encode_message("one"))
    feed(server, 7, encode_message("two"))
    text = out.getvalue()
    assert text.count("New client detected") == 1
    assert text.endswith("one\ntwo\n")


def test_sender_change_mid_byte_restarts():
    server, out, _ = make()
    feed(server, 1, [0, 1, 0, 0])
    feed(server, 2, encode_message("ok"))
    text = out.getvalue()
    assert text.count("New client detected") == 2
    assert text.endswith(NEW_CLIENT + "ok\n")


def test_utf8_text_is_reassembled():
    server, out, _ = make()
    feed(server, 3, encode_message("café ✓"))
    assert out.getvalue() == NEW_CLIENT + "café ✓\n"


def test_handle_returns_events():
    server, _, _ = make()
    events = feed(server, 5, encode_message("x"))
    kinds = [e.kind for e in events]
    assert kinds == [EventKind.NEW_CLIENT, EventKind.CHARACTER, EventKind.END]
    assert events[1].value == ord("x")


def test_unexpected_signal_rejected():
    server, _, _ = make()
    with pytest.raises(ValueError):
        server.handle(signal.SIGINT, 5)


def test_banner():
    server, out, _ = make()
    server.banner(1234)
    assert out.getvalue() == (
        "\033[36mPID\033[0m \033[36m->\033[0m 1234\n"
        "\033[94mWaiting for a message...\033[0m\n"
    )


@pytest.mark.parametrize("entry", [main, bonus_main])
def test_main_rejects_arguments(capsys, entry):
    assert entry(["extra"]) == 1
    text = capsys.readouterr().out
    assert "Error: wrong format." in text
    assert "Try: ./server" in text