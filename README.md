# sigtalk

A tiny messenger that carries text from one process to another using nothing
but the two POSIX user signals. Each byte travels as eight signals, most
significant bit first: `SIGUSR1` for a 1 and `SIGUSR2` for a 0. The server
acknowledges every bit with `SIGUSR1`, and the client waits for that
acknowledgement before sending the next bit.

The client runs on any POSIX system. The server waits for signals with
`signal.sigtimedwait`, which Python offers on Linux but not on macOS, so the
server needs Linux (or another platform that provides that call).

## Install

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then writes
every byte it receives to standard output:

```
$ sigtalk-server
Server PID: 48213
```

From another terminal, send a message to that process id:

```
$ sigtalk-client 48213 "hello there"
SUCCESS
```

The server prints `hello there`. A message given as text is sent as UTF-8.
If no signal arrives for about a second (10000 idle polls of 100
microseconds), the server drops any partially received byte, so an
interrupted client cannot corrupt the next message.

Stop the server with Ctrl-C; it then exits with status 0. If it cannot send an
acknowledgement back to a client, it prints `Error: kill: failed to send ACK`
to standard error and exits with status 1.

### Client errors

The client prints `Error: <reason>` to standard error and exits with status 1
when:

- it was not given exactly a process id and a non-empty message;
- the process id has anything other than the digits 0-9 in it;
- the process id falls outside 1 to 4194304;
- no such process exists, or it may not be signalled;
- its handler for `SIGUSR1` cannot be installed;
- a signal cannot be sent.

The client waits for each acknowledgement without a time limit, so it hangs
if the receiving process never answers.

## Library use

The pieces work without signals too:

```python
from sigtalk.protocol import BitAssembler, encode_message, parse_pid

bits = list(encode_message(b"Hi"))   # sixteen bits, MSB first
assembler = BitAssembler()
received = bytes(b for b in map(assembler.push, bits) if b is not None)
assert received == b"Hi"

parse_pid("4242")                    # 4242; raises ValueError when invalid
```

- `sigtalk.protocol` — `BitAssembler` (`push`, `reset`), `byte_to_bits`,
  `encode_message`, `parse_pid`, and the constants `MIN_PID`, `MAX_PID`,
  `BITS_PER_BYTE`.
- `sigtalk.client` — `parse_args`, `send_message`, `main`, and `ClientError`.
- `sigtalk.server` — `Server`, with `handle(sig, sender_pid)` for one bit
  signal, `tick()` for one idle poll, and `serve_forever()`; plus `main`.
  `Server` takes an `output` binary stream (standard output by default),
  an `idle_limit` and a `poll_interval`.
- `sigtalk.formatting` — `sprintf` and `printf`, a small printf dialect with
  `%c %s %d %i %u %x %X %p %%`; integers are treated as 32-bit C ints and
  unknown conversions produce nothing.
- `sigtalk.strings` — `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr` (which returns an index or `None`).

## Tests

```
pip install ".[test]"
pytest
```