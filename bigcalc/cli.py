"""Command line entry point: ``bigcalc <number1> <operator> <number2>``."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

from .arithmetic import add, divide, multiply, subtract
from .digits import InvalidNumberError, is_valid_number


class Operator(Enum):
    """Supported operators, keyed by the symbol used on the command line."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @classmethod
    def from_token(cls, token: str) -> "Operator":
        """Pick the operator named by the first character of ``token``."""
        if token:
            for member in cls:
                if member.value == token[0]:
                    return member
        raise ValueError(f"Invalid operator {token!r}")

    def apply(self, left: str, right: str) -> str:
        return _OPERATIONS[self](left, right)


_OPERATIONS = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def evaluate(left: str, operator: Operator | str, right: str) -> str:
    """Apply ``operator`` to two digit strings and return the result."""
    if not isinstance(operator, Operator):
        operator = Operator.from_token(operator)
    for operand in (left, right):
        if not is_valid_number(operand):
            raise InvalidNumberError(operand)
    return operator.apply(left, right)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: bigcalc <number1> <operator> <number2>")
        return 1
    left, token, right = args
    try:
        operator = Operator.from_token(token)
    except ValueError:
        print(f"Error: Invalid operator '{token}'\nValid operators: +,-,x,/")
        return 1
    if not is_valid_number(left):
        print(f"Error: Invalid character in first number: {left}")
        return 1
    if not is_valid_number(right):
        print(f"Error: Invalid character in second number: {right}")
        return 1
    try:
        result = evaluate(left, operator, right)
    except ZeroDivisionError:
        print("Error: Divisor is empty list. Division by zero is not allowed.")
        return 1
    print(f"{left} {operator.value} {right} = {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())