import pytest

from bigcalc.digits import (
    InvalidNumberError,
    format_digits,
    is_valid_number,
    parse_digits,
    strip_leading_zeros,
)


@pytest.mark.parametrize("text", ["0", "7", "0012", "98765432109876543210"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["", "-5", "1.5", "12a", " 3", "\u0663"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_parse_digits_order():
    assert parse_digits("12345") == [1, 2, 3, 4, 5]


def test_parse_keeps_leading_zeros():
    assert parse_digits("007") == [0, 0, 7]


@pytest.mark.parametrize("text", ["", "4x2", "+1"])
def test_parse_rejects_invalid(text):
    with pytest.raises(InvalidNumberError):
        parse_digits(text)


def test_invalid_number_error_is_value_error():
    with pytest.raises(ValueError, match="'x'"):
        parse_digits("1x")


@pytest.mark.parametrize("text", ["0", "5", "120", "31415926535897932384"])
def test_format_parse_round_trip(text):
    assert format_digits(parse_digits(text)) == text


def test_strip_leading_zeros():
    assert strip_leading_zeros([0, 0, 1, 0, 2]) == [1, 0, 2]


def test_strip_all_zeros_keeps_one():
    assert strip_leading_zeros([0, 0, 0]) == [0]


def test_strip_does_not_modify_input():
    digits = [0, 4]
    strip_leading_zeros(digits)
    assert digits == [0, 4]


def test_strip_empty_raises():
    with pytest.raises(ValueError):
        strip_leading_zeros([])


def test_format_empty_raises():
    with pytest.raises(ValueError):
        format_digits([])


def test_format_rejects_non_digit():
    with pytest.raises(ValueError):
        format_digits([1, 10])