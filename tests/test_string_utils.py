import time

import pytest

from d3util.string_utils import (
    current_time_string,
    ends_with,
    join,
    replace,
    split,
    starts_with,
    to_hex,
    to_lower,
    to_upper,
    trim,
    trim_left,
    trim_right,
)


def test_trim_variants():
    assert trim(" \t hi there \n") == "hi there"
    assert trim_left("  hi  ") == "hi  "
    assert trim_right("  hi  ") == "  hi"


def test_trim_all_whitespace_gives_empty():
    assert trim(" \t\r\n\v\f ") == ""


def test_trim_keeps_non_ascii_whitespace():
    assert trim("\u00a0x\u00a0") == "\u00a0x\u00a0"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("a,b,", ["a", "b"]),
        (",a", ["", "a"]),
        ("a,,", ["a", ""]),
        ("", []),
        ("abc", ["abc"]),
    ],
)
def test_split(text, expected):
    assert split(text, ",") == expected


def test_split_rejects_multichar_delimiter():
    with pytest.raises(ValueError):
        split("a::b", "::")


def test_split_join_round_trip():
    parts = ["one", "two", "", "three"]
    assert split(join(parts, ";"), ";") == parts


def test_join():
    assert join(["a", "b", "c"], ", ") == "a, b, c"
    assert join([], "-") == ""


def test_case_conversion_ascii_only():
    assert to_lower("AbC Ä") == "abc Ä"
    assert to_upper("abc é") == "ABC é"


def test_starts_and_ends_with():
    assert starts_with("prefix_body", "prefix") is True
    assert starts_with("ab", "abc") is False
    assert ends_with("body.txt", ".txt") is True
    assert ends_with("t", "txt") is False


def test_replace_all_occurrences():
    assert replace("a-b-c", "-", "+") == "a+b+c"
    assert replace("aaa", "a", "aa") == "aaaaaa"


def test_replace_empty_old_raises():
    with pytest.raises(ValueError):
        replace("abc", "", "x")


def test_current_time_string_default_format_parses():
    stamp = current_time_string()
    parsed = time.strptime(stamp, "%Y-%m-%d %H:%M:%S")
    assert parsed.tm_year == time.localtime().tm_year


def test_current_time_string_custom_format():
    assert current_time_string("%Y") == time.strftime("%Y")


def test_to_hex_pins():
    assert to_hex(255, 1) == "ff"
    assert to_hex(-1) == "ffffffff"


@pytest.mark.parametrize("value, width", [(0, 1), (10, 2), (4096, 4), (123456, 4)])
def test_to_hex_round_trip(value, width):
    text = to_hex(value, width)
    assert len(text) == width * 2
    assert int(text, 16) == value


def test_to_hex_rejects_bad_width():
    with pytest.raises(ValueError):
        to_hex(1, 0)