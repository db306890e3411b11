"""The one-bit-per-signal wire format and its decoder.

Each byte travels as eight bits, most significant first; a message is
its bytes followed by a NUL byte. A 1 bit is sent as SIGUSR1 and a 0
bit as SIGUSR2.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


class EventKind(Enum):
    """What a decoder noticed after a bit arrived."""

    NEW_CLIENT = "new_client"
    CHARACTER = "character"
    END = "end"


@dataclass(frozen=True)
class Event:
    """A decoder event; ``value`` holds the byte for CHARACTER events."""

    kind: EventKind
    sender: int
    value: Optional[int] = None


def encode_byte(value: int) -> Tuple[int, ...]:
    """The eight bits of ``value``, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(7, -1, -1))


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """The bits of ``message`` followed by those of the terminating NUL.

    Text is sent as UTF-8. Anything after an embedded NUL is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(0)


class MessageDecoder:
    """Rebuilds bytes from bits, restarting whenever the sender changes."""

    def __init__(self) -> None:
        self._character = 0
        self._bit_index = 0
        self._last_sender = 0

    def reset(self) -> None:
        """Drop any partial byte and forget the last sender."""
        self._character = 0
        self._bit_index = 0
        self._last_sender = 0

    def feed(self, sender: int, bit: Union[int, bool]) -> List[Event]:
        """Take one bit from ``sender`` and return the events it caused."""
        events: List[Event] = []
        if sender != self._last_sender:
            self._last_sender = sender
            self._character = 0
            self._bit_index = 0
            events.append(Event(EventKind.NEW_CLIENT, sender))
        self._character = ((self._character << 1) | (1 if bit else 0)) & 0xFF
        self._bit_index += 1
        if self._bit_index == 8:
            if self._character == 0:
                events.append(Event(EventKind.END, sender))
            else:
                events.append(Event(EventKind.CHARACTER, sender, self._character))
            self._character = 0
            self._bit_index = 0
        return events