"""Wire format: one signal per bit, most significant bit first."""

from collections.abc import Iterator
from dataclasses import dataclass

from .strings import atoi

MIN_PID = 1
MAX_PID = 4194304
BITS_PER_BYTE = 8

_ASCII_DIGITS = frozenset("0123456789")


@dataclass
class BitAssembler:
    """Collects bits, most significant first, into whole bytes."""

    value: int = 0
    bit_count: int = 0

    def push(self, bit: int) -> int | None:
        """Add one bit; return the finished byte once eight have arrived."""
        if bit:
            self.value |= 1 << (BITS_PER_BYTE - 1 - self.bit_count)
        self.bit_count += 1
        if self.bit_count == BITS_PER_BYTE:
            byte = self.value
            self.reset()
            return byte
        return None

    def reset(self) -> None:
        """Drop any partially received byte."""
        self.value = 0
        self.bit_count = 0


def byte_to_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError("byte must be in the range 0..255")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits that carry a message, byte by byte."""
    data = (
        message.encode("utf-8", "surrogateescape")
        if isinstance(message, str)
        else bytes(message)
    )
    for byte in data:
        yield from byte_to_bits(byte)


def parse_pid(text: str) -> int:
    """Validate a process id given as decimal text."""
    if not text or not set(text) <= _ASCII_DIGITS:
        raise ValueError("PID: PID must be a numeric value")
    pid = atoi(text)
    if not MIN_PID <= pid <= MAX_PID:
        raise ValueError("PID: PID out of valid range")
    return pid