"""Send a message to a server process, one signal per bit."""

import os
import signal
import sys
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from .formatting import printf
from .protocol import encode_message, parse_pid

_BIT_DELAY = 50e-6
_ACK_POLL = 100e-6
_USAGE = "Usage: client <server_pid> <message>"


class ClientError(Exception):
    """Raised when the client cannot deliver its message."""


def parse_args(argv: Sequence[str]) -> tuple[int, str]:
    """Check the arguments and return the server pid and the message."""
    if len(argv) != 2 or not argv[0] or not argv[1]:
        raise ClientError(_USAGE)
    pid_text, message = argv
    try:
        server_pid = parse_pid(pid_text)
    except ValueError as exc:
        raise ClientError(str(exc)) from None
    try:
        os.kill(server_pid, 0)
    except OSError:
        raise ClientError(
            "kill: No such process or insufficient permission"
        ) from None
    return server_pid, message


class _AckFlag:
    def __init__(self) -> None:
        self.received = False

    def __call__(self, signum, frame) -> None:
        self.received = True


@contextmanager
def _ack_handler() -> Iterator[_AckFlag]:
    flag = _AckFlag()
    try:
        previous = signal.signal(signal.SIGUSR1, flag)
    except (OSError, ValueError):
        raise ClientError("sigaction: failed to set handler for SIGUSR1") from None
    try:
        yield flag
    finally:
        signal.signal(signal.SIGUSR1, previous)


def send_message(server_pid: int, message: str | bytes) -> None:
    """Send every bit of message and wait for an acknowledgement of each."""
    with _ack_handler() as ack:
        for bit in encode_message(message):
            time.sleep(_BIT_DELAY)
            sig = signal.SIGUSR1 if bit else signal.SIGUSR2
            try:
                os.kill(server_pid, sig)
            except OSError:
                raise ClientError(
                    f"kill: failed to send signal ({sig.name})"
                ) from None
            while not ack.received:
                time.sleep(_ACK_POLL)
            ack.received = False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        server_pid, message = parse_args(args)
        send_message(server_pid, message)
    except ClientError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    printf("%s\n", "SUCCESS")
    return 0