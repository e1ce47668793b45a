"""Decimal digit sequences: validation, parsing and formatting."""

from __future__ import annotations

from collections.abc import Sequence

_DECIMAL = frozenset("0123456789")


class InvalidNumberError(ValueError):
    """Raised when an operand holds something other than decimal digits."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        if reason is None:
            bad = next((ch for ch in text if ch not in _DECIMAL), None)
            if bad is None:
                reason = "number is empty"
            else:
                reason = f"invalid digit {bad!r}"
        super().__init__(f"{reason} in {text!r}")


def is_valid_number(text: str) -> bool:
    """Return True if ``text`` is a non-empty string of ASCII decimal digits."""
    return bool(text) and all(ch in _DECIMAL for ch in text)


def parse_digits(text: str) -> list[int]:
    """Turn a digit string into a list of digits, most significant first."""
    if not is_valid_number(text):
        raise InvalidNumberError(text)
    return [ord(ch) - ord("0") for ch in text]


def strip_leading_zeros(digits: Sequence[int]) -> list[int]:
    """Drop leading zeros, keeping a single zero when every digit is zero."""
    if not digits:
        raise ValueError("cannot strip an empty digit sequence")
    for index, digit in enumerate(digits):
        if digit != 0:
            return list(digits[index:])
    return [0]


def format_digits(digits: Sequence[int]) -> str:
    """Render a digit sequence as a string."""
    if not digits:
        raise ValueError("cannot format an empty digit sequence")
    for digit in digits:
        if not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    return "".join(str(digit) for digit in digits)