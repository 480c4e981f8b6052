import pytest

from ftkit.strings import (
    atoi,
    itoa,
    strchr,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlcpy_fits():
    assert strlcpy("old", "hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates_and_reports_source_length():
    text, total = strlcpy("old", "hello", 3)
    assert text == "hello"[:2]
    assert total == len("hello")


def test_strlcpy_size_zero_leaves_destination():
    assert strlcpy("old", "hello", 0) == ("old", len("hello"))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("", "abc", -1)


def test_strlcat_fits():
    assert strlcat("abc", "def", 10) == ("abc" + "def", len("abcdef"))


def test_strlcat_truncates():
    text, total = strlcat("abc", "def", 5)
    assert len(text) == 4
    assert text.startswith("abc")
    assert total == len("abcdef")


def test_strlcat_size_not_above_destination():
    text, total = strlcat("abc", "def", 2)
    assert text == "abc"
    assert total == len("def") + 2


@pytest.mark.parametrize("size", range(0, 12))
def test_strlcat_result_never_exceeds_size(size):
    text, _ = strlcat("ab", "cdefgh", size)
    if size > 2:
        assert len(text) <= size - 1
        assert "abcdefgh".startswith(text)


def test_strchr_finds_first():
    assert strchr("hello", "l") == 2


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_int_is_truncated_to_a_byte():
    assert strchr("hello", ord("e")) == 1
    assert strchr("hello", 256 + ord("h")) == 0


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == 3
    assert strrchr("abca", "a") == 3


def test_strrchr_first_character():
    assert strrchr("abc", "a") == 0


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "z") is None
    assert strrchr("abc", 0) == len("abc")


def test_strnstr_found():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6


def test_strnstr_needle_past_length():
    assert strnstr("lorem ipsum", "ipsum", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("lorem", "", 0) == 0


def test_strnstr_overlapping_start():
    assert strnstr("aaab", "ab", 4) == 2


def test_strnstr_length_beyond_haystack():
    assert strnstr("abc", "c", 100) == 2


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_stops_at_length():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_end_of_string_counts_as_zero():
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apply", 5) == -strncmp("apply", "apple", 5)


def test_atoi_whitespace_and_sign():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_double_sign_stops():
    assert atoi("--1") == 0
    assert atoi("") == 0


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_into_int():
    assert atoi("2147483648") == -2147483648


def test_atoi_accumulator_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("number", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")