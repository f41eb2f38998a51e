import pytest

from sigtalk.strings import atoi, itoa, split, strnstr, strtrim, substr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -17", -17),
        ("+5", 5),
        ("\t\n\v\f\r 8", 8),
        ("12ab34", 12),
        ("abc", 0),
        ("", 0),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_accepts_only_one_sign():
    assert atoi("--3") == atoi("")
    assert atoi("+-3") == atoi("")


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -98765, 2147483647, -2147483648])
def test_atoi_round_trips_int32(n):
    assert atoi(str(n)) == n


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == atoi("-2147483648")
    assert atoi("4294967296") == atoi("0")


def test_atoi_saturates_past_long_range():
    assert atoi("9223372036854775808") == atoi("9223372036854775807")
    assert atoi("99999999999999999999999") == atoi("9223372036854775807")
    assert atoi("-9223372036854775809") == atoi("-9223372036854775808")


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_single_minus():
    text = itoa(-2147483648)
    assert text.startswith("-")
    assert text.count("-") == 1


@pytest.mark.parametrize(
    "text, sep, expected",
    [
        ("hello world split", " ", ["hello", "world", "split"]),
        ("nowordhere", " ", ["nowordhere"]),
        ("", " ", []),
        ("a,,b,c", ",", ["a", "b", "c"]),
        (",,,", ",", []),
        ("  lead and trail  ", " ", ["lead", "and", "trail"]),
    ],
)
def test_split(text, sep, expected):
    assert split(text, sep) == expected


def test_split_pieces_never_contain_separator():
    pieces = split("x;;y;z;;;w;", ";")
    assert all(piece and ";" not in piece for piece in pieces)
    assert ";".join(pieces) == "x;y;z;w"


@pytest.mark.parametrize("sep", ["", "ab"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a b", sep)


def test_strtrim_example():
    assert strtrim("  hogehoge: ", ": ") == "hogehoge"


def test_strtrim_everything_trimmed():
    assert strtrim("::  ::", ": ") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_keeps_inner_characters():
    assert strtrim("xxaxbxx", "x") == "axb"


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_length_clipped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_at_end():
    assert substr("hello", 5, 2) == ""


@pytest.mark.parametrize("start, length", [(-1, 2), (0, -1)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("hello", start, length)


def test_strnstr_finds_needle():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:].startswith("world")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strnstr_needle_must_fit_in_window():
    assert strnstr("abcabc", "abc", 2) is None
    assert strnstr("abcabc", "abc", 3) == 0


def test_strnstr_length_beyond_haystack():
    assert strnstr("ab", "b", 50) == 1


def test_strnstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)