import pytest

from sigtalk.textutils import (
    atoi,
    itoa,
    memcmp,
    split,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 123456])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero_is_single_digit():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


@pytest.mark.parametrize("prefix", [" ", "\t", "\n", "\v", "\f", "\r", " \t\r\n"])
def test_atoi_skips_whitespace(prefix):
    assert atoi(prefix + "2147483647") == 2147483647


def test_atoi_stops_at_non_digit():
    assert atoi("-2147483648xyz") == -2147483648
    assert atoi("+123456abc") == 123456


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", " + 5", "x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,,", ",") == []
    assert split("", ",") == []


def test_split_no_separator_present():
    assert split("single", ",") == ["single"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_split_join_invariant():
    text = "a,,b,c,,,d"
    pieces = split(text, ",")
    assert ",".join(pieces) == text.replace(",,,", ",").replace(",,", ",")
    assert all(pieces)


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_everything_removed():
    assert strtrim("abcabc", "abc") == ""


def test_strtrim_none_charset_keeps_text():
    assert strtrim("  spaced  ", None) == "  spaced  "


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  spaced  ", "") == "  spaced  "


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_start_beyond_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 99, 3) == ""


def test_substr_length_clamped():
    assert substr("hello", 1, 100) == "ello"


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_match_position_invariant():
    haystack, needle = "foo bar baz", "bar"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_match_must_fit_in_length():
    haystack, needle = "foo bar baz", "bar"
    index = strnstr(haystack, needle, len(haystack))
    assert strnstr(haystack, needle, index + len(needle)) == index
    assert strnstr(haystack, needle, index + len(needle) - 1) is None


def test_strnstr_missing():
    assert strnstr("foo bar", "qux", 7) is None


@pytest.mark.parametrize(
    "s1,s2",
    [("abc", "abd"), ("abc", "ab"), ("", "a"), ("zeta", "alpha")],
)
def test_strncmp_sign_matches_ordering(s1, s2):
    n = max(len(s1), len(s2))
    result = strncmp(s1, s2, n)
    assert (result > 0) == (s1 > s2)
    assert (result < 0) == (s1 < s2)
    assert strncmp(s2, s1, n) == -result


def test_strncmp_limited_prefix_equal():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_equal_strings():
    assert strncmp("same", "same", 100) == 0


def test_memcmp_difference_of_bytes():
    b1 = bytes([1, 2, 200])
    b2 = bytes([1, 2, 100])
    assert memcmp(b1, b2, 3) == 200 - 100
    assert memcmp(b2, b1, 3) == 100 - 200
    assert memcmp(b1, b2, 2) == 0


def test_memcmp_short_buffer_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    copied, total = strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    assert strlcat("foo", "bar", 20) == ("foobar", len("foobar"))


def test_strlcat_truncates_to_buffer():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert len(result) == 5 - 1
    assert total == len("foobar")


def test_strlcat_dst_fills_buffer():
    result, total = strlcat("foobar", "baz", 4)
    assert result == "foobar"
    assert total == 4 + len("baz")


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: c * 2) == ""


def test_strchr_finds_first():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strrchr_finds_last():
    text = "banana"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]


def test_strchr_nul_finds_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")
    with pytest.raises(ValueError):
        strrchr("hello", "")