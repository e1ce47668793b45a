"""Arbitrary-precision arithmetic on non-negative decimal digit strings."""

from __future__ import annotations

from itertools import zip_longest

from .digits import format_digits, parse_digits, strip_leading_zeros


def _add_digits(x: list[int], y: list[int]) -> list[int]:
    result: list[int] = []
    carry = 0
    for dx, dy in zip_longest(reversed(x), reversed(y), fillvalue=0):
        carry, digit = divmod(dx + dy + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def _sub_digits(larger: list[int], smaller: list[int]) -> list[int]:
    """Subtract ``smaller`` from ``larger``; ``larger`` must not be smaller."""
    result: list[int] = []
    borrow = 0
    for dx, dy in zip_longest(reversed(larger), reversed(smaller), fillvalue=0):
        value = dx - dy - borrow
        borrow = 1 if value < 0 else 0
        result.append(value + 10 * borrow)
    result.reverse()
    return strip_leading_zeros(result)


def _compare(x: list[int], y: list[int]) -> int:
    """Compare two stripped digit lists, returning -1, 0 or 1."""
    key_x, key_y = (len(x), x), (len(y), y)
    return (key_x > key_y) - (key_x < key_y)


def add(a: str, b: str) -> str:
    """Return the sum of two digit strings.

    Leading zeros of the longer operand are kept, as digits are added column
    by column from the right.
    """
    return format_digits(_add_digits(parse_digits(a), parse_digits(b)))


def subtract(a: str, b: str) -> str:
    """Return ``a - b``, prefixed with ``-`` when the result is negative."""
    x = strip_leading_zeros(parse_digits(a))
    y = strip_leading_zeros(parse_digits(b))
    order = _compare(x, y)
    if order == 0:
        return "0"
    if order < 0:
        return "-" + format_digits(_sub_digits(y, x))
    return format_digits(_sub_digits(x, y))


def multiply(a: str, b: str) -> str:
    """Return the product of two digit strings."""
    x = strip_leading_zeros(parse_digits(a))
    y = strip_leading_zeros(parse_digits(b))
    if x == [0] or y == [0]:
        return "0"
    # Column accumulators, least significant first.
    columns = [0] * (len(x) + len(y))
    for shift, dy in enumerate(reversed(y)):
        carry = 0
        for offset, dx in enumerate(reversed(x)):
            carry, columns[shift + offset] = divmod(
                columns[shift + offset] + dx * dy + carry, 10
            )
        position = shift + len(x)
        while carry:
            carry, columns[position] = divmod(columns[position] + carry, 10)
            position += 1
    columns.reverse()
    return format_digits(strip_leading_zeros(columns))


def divide(a: str, b: str) -> str:
    """Return the integer quotient ``a // b``.

    Raises ZeroDivisionError when the divisor is zero.
    """
    dividend = parse_digits(a)
    divisor = strip_leading_zeros(parse_digits(b))
    if divisor == [0]:
        raise ZeroDivisionError("Division by zero is not allowed.")
    quotient: list[int] = []
    remainder = [0]
    for digit in dividend:
        remainder = strip_leading_zeros([*remainder, digit])
        count = 0
        while _compare(remainder, divisor) >= 0:
            remainder = _sub_digits(remainder, divisor)
            count += 1
        quotient.append(count)
    return format_digits(strip_leading_zeros(quotient))