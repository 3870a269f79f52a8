import string

import pytest

from jshell.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_is_alpha_accepts_letters(char):
    assert is_alpha(char) is True
    assert is_alpha(ord(char)) is True


@pytest.mark.parametrize("char", ["0", "9", " ", "@", "[", "`", "{", "é"])
def test_is_alpha_rejects_non_letters(char):
    assert is_alpha(char) is False


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_conversion_of_letters():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"


def test_case_conversion_round_trip():
    for char in string.ascii_lowercase:
        assert to_lower(to_upper(char)) == char
    for char in string.ascii_uppercase:
        assert to_upper(to_lower(char)) == char


def test_case_conversion_leaves_others_alone():
    for char in "09 @[`{~":
        assert to_upper(char) == char
        assert to_lower(char) == char


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("123 456") == 123


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 1000, -90210])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)