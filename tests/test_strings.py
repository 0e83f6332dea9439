import pytest

from solong.libft.strings import atoi, itoa, split, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -12345, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert int(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("  \t\n+42abc") == 42
    assert atoi("\r\v\f-17 99") == -17


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_split_sentence():
    assert split("HOla que tal estamos", " ") == ["HOla", "que", "tal", "estamos"]


def test_split_drops_empty_fields():
    words = split("  a  bb   ccc ", " ")
    assert all(words)
    assert "".join(words) == "abbccc"


def test_split_round_trip_with_single_separators():
    text = "11111,10001,1P0E1"
    assert ",".join(split(text, ",")) == text


def test_split_empty_text():
    assert split("", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_spaces():
    assert strtrim("   h   ", " ") == "h"


def test_strtrim_invariants():
    charset = "xy"
    result = strtrim("xyxhellox worldyy", charset)
    assert result in "xyxhellox worldyy"
    assert result[0] not in charset
    assert result[-1] not in charset


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  x  ", "") == "  x  "


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim("abc", None)


def test_substr_extension():
    name = "maps/so_long.ber"
    assert substr(name, len(name) - 4, 4) == ".ber"


def test_substr_clamps_to_end():
    text = "Hello, world!"
    assert substr(text, 7, 100) == text[7:]
    assert len(substr(text, 5, 3)) == 3


def test_substr_out_of_range_or_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 0, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_not_found():
    assert strnstr("Hello world, welcome!", "yes", 15) is None


def test_strnstr_found_is_suffix_starting_with_needle():
    haystack = "Hello world, welcome!"
    result = strnstr(haystack, "world", 15)
    assert result is not None
    assert result.startswith("world")
    assert haystack.endswith(result)


def test_strnstr_match_must_fit_in_length():
    assert strnstr("abcdef", "def", 5) is None
    assert strnstr("abcdef", "def", 6) == "def"


def test_strnstr_empty_needle_returns_haystack():
    assert strnstr("so_long.ber", "", 0) == "so_long.ber"


def test_strnstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)