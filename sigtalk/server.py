"""Receive messages sent one signal per bit and write them to output."""

import os
import signal
import sys
import time
from collections.abc import Sequence
from typing import BinaryIO

from .formatting import printf
from .protocol import BitAssembler

_ACK_DELAY = 50e-6
_POLL_INTERVAL = 100e-6
_IDLE_LIMIT = 10000
_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Decodes incoming signals into bytes and acknowledges each bit."""

    def __init__(
        self,
        output: BinaryIO | None = None,
        idle_limit: int = _IDLE_LIMIT,
        poll_interval: float = _POLL_INTERVAL,
    ) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.idle_limit = idle_limit
        self.poll_interval = poll_interval
        self.assembler = BitAssembler()
        self.idle_ticks = 0

    def handle(self, sig: int, sender_pid: int) -> int | None:
        """Take one bit signal, emit a finished byte and acknowledge the sender."""
        self.idle_ticks = 0
        byte = self.assembler.push(1 if sig == signal.SIGUSR1 else 0)
        if byte is not None:
            self.output.write(bytes((byte,)))
            self.output.flush()
        time.sleep(_ACK_DELAY)
        try:
            os.kill(sender_pid, signal.SIGUSR1)
        except OSError as exc:
            raise RuntimeError("kill: failed to send ACK") from exc
        return byte

    def tick(self) -> bool:
        """Count one idle poll; drop a partial byte after too many in a row."""
        self.idle_ticks += 1
        if self.idle_ticks >= self.idle_limit:
            self.assembler.reset()
            self.idle_ticks = 0
            return True
        return False

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them until interrupted."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigtimedwait(_SIGNALS, self.poll_interval)
                if info is None:
                    self.tick()
                else:
                    self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server; return the process exit status."""
    server = Server()
    printf("Server PID: %d\n", os.getpid())
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    except RuntimeError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    return 0