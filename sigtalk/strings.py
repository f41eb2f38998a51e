"""Small string helpers with C-library-like semantics."""

_WHITESPACE = " \f\n\r\t\v"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range, as a C cast to int does."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit.  A value beyond the 64-bit range saturates, and the
    result is then wrapped to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not _is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
        if not negative and number > _LONG_MAX:
            return _to_int32(_LONG_MAX)
        if negative and -number < _LONG_MIN:
            return _to_int32(_LONG_MIN)
    return _to_int32(-number if negative else number)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{n:d}"


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of charset from both ends of text."""
    if not isinstance(charset, str):
        raise TypeError("charset must be a string")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle within the first length characters of haystack.

    Returns the index of the first occurrence, 0 for an empty needle, or
    None when the needle does not occur completely inside that window.
    """
    _require_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index