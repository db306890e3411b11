# sigtalk

sigtalk sends a line of text from one process to another using only the two
user signals, `SIGUSR1` and `SIGUSR2`. The text is sent as UTF-8. Each byte
goes out as eight signals, most significant bit first. `SIGUSR1` carries a 1
and `SIGUSR2` carries a 0. A zero byte marks the end of the message.

## Requirements

A POSIX system is needed for `SIGUSR1` and `SIGUSR2`. The server also needs
`signal.sigwaitinfo`, which tells it which process sent each signal. Linux has
it. On platforms without it, `Server.serve_forever` raises `RuntimeError`.

## Install

```
pip install .
```

## Usage

Start a server in one terminal. It prints its process id and waits:

```
sigtalk-server
```

From another terminal, send it a message:

```
sigtalk-client <server_pid> "hello there"
```

The client pauses 30 microseconds after each signal so the server can keep
up. If the message has a zero character in it, nothing after that character
is sent.

The server decodes the bytes as UTF-8 and prints the text as it arrives.
Bytes that are not valid UTF-8 come out as replacement characters. When the
closing zero byte arrives, the server prints a newline. If bits start arriving
from a different process, the server prints a "New client detected" notice and
starts the current byte over. Stop the server with Ctrl-C. It then exits with
status 130.

### Acknowledged delivery

The `-bonus` commands add an acknowledgement:

```
sigtalk-server-bonus
sigtalk-client-bonus <server_pid> "hello there"
```

When a whole message has arrived, the server prints "Message fully received!"
and sends `SIGUSR1` back to the sender. The client prints "Message received
successfully!" when that signal reaches it.

### Errors

The client takes exactly two arguments. Otherwise it prints a usage hint and
exits with status 1.

The pid must be an optional `+` followed by decimal digits only. The client
also rejects a pid that reads as 0 or as -1. A value too large for a 64-bit
integer reads as -1. In each of these cases the client prints an error and
exits with status 1. It also exits with status 1 if the signal cannot be
delivered, for example when no such process exists.

The server accepts no arguments. If it is given any, it prints a usage hint
and exits with status 1.

## Library use

### Encoding and decoding bits

`sigtalk.encoding` encodes and decodes bits without sending any signals:

```python
from sigtalk.encoding import EventKind, MessageDecoder, encode_message

decoder = MessageDecoder()
events = []
for bit in encode_message("hi"):
    events.extend(decoder.feed(1234, bit))

text = bytes(e.value for e in events if e.kind is EventKind.CHARACTER)
assert text == b"hi"
assert events[-1].kind is EventKind.END
```

- `encode_byte(value)` returns the eight bits of a byte as a tuple.
- `MessageDecoder.feed(sender, bit)` returns a list of `Event` objects. An
  event's kind is `NEW_CLIENT`, `CHARACTER` or `END`.
- `MessageDecoder.reset()` drops any partly received byte.

### Sending and receiving

`sigtalk.client.send_message(pid, message, delay, kill)` and
`send_byte(pid, value, delay, kill)` send the signals. They call `os.kill`
unless you pass your own `kill` function.

`sigtalk.server.Server(acknowledge, out, kill)` processes signals one at a
time:

- `handle(signum, sender)` writes the decoded text to `out` (standard output
  by default) and returns the events.
- `banner(pid)` prints the process id to signal.
- `serve_forever()` waits for real signals.

### Helper modules

The package also includes small helpers:

- `sigtalk.chars`: ASCII classification and case conversion.
- `sigtalk.memory`: `bytearray` fill, copy, search and compare.
- `sigtalk.strings` and `sigtalk.textops`: string routines that stop at a
  NUL character, plus `split`, `strtrim`, `atoi` and `itoa`.
- `sigtalk.linkedlist`: `LinkedList` and `Node`.
- `sigtalk.output`: `format_string` and `printf`, which handle `%c %s %d %i %u
  %x %X %p`, and the `put*_fd` writers.
- `sigtalk.pid`: `is_numeric`, `strict_atoi`, `parse_pid` and `PidError`.

## Tests

```
pip install .[test]
pytest
```