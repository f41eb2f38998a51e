"""A small printf with the conversions %c %s %d %i %u %x %X %p and %%."""

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = 2**64 - 1


def _signed32(value: Any) -> int:
    number = operator.index(value) & _UINT32_MASK
    return number - (1 << 32) if number & 0x80000000 else number


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _UINT32_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & _UINTPTR_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "d": lambda value: f"{_signed32(value):d}",
    "i": lambda value: f"{_signed32(value):d}",
    "u": lambda value: f"{_unsigned32(value):d}",
    "x": lambda value: f"{_unsigned32(value):x}",
    "X": lambda value: f"{_unsigned32(value):X}",
    "p": _format_pointer,
}


def _convert(spec: str, pending: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERTERS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(pending)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return converter(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text.

    Unknown conversions produce nothing; a lone trailing '%' is kept.
    Integers are treated as 32-bit C ints.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    pending = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)