# bigcalc

A small calculator for arbitrarily large non-negative whole numbers. Numbers
are written as strings of decimal digits and worked on one digit at a time.
There is no limit on their size.

## Installation

```
pip install .
```

## Command line

```
bigcalc <number1> <operator> <number2>
```

You can also run it as `python -m bigcalc.cli <number1> <operator> <number2>`.

The operator is one of `+`, `-`, `x` (multiply) and `/` (integer division).
Only the first character of the operator argument is looked at. Both numbers
must be made only of the digits 0–9.

```
$ bigcalc 99999999999999999999 + 1
99999999999999999999 + 1 = 100000000000000000000
$ bigcalc 12 - 345
12 - 345 = -333
$ bigcalc 123456789 x 987654321
123456789 x 987654321 = 121932631112635269
$ bigcalc 100 / 7
100 / 7 = 14
```

The command prints an error message and exits with status 1 in these cases:

- it is not given exactly three arguments;
- the operator is unknown;
- either number contains anything other than digits, or is empty;
- the divisor is zero.

On success it exits with status 0.

## Library

All operations take digit strings and return digit strings:

```python
from bigcalc.arithmetic import add, subtract, multiply, divide
from bigcalc.cli import Operator, evaluate

add("123", "989")          # "1112"
subtract("12", "345")      # "-333"
multiply("50", "20")       # "1000"
divide("100", "7")         # "14"

evaluate("50", "x", "20")              # "1000"
evaluate("50", Operator.DIVIDE, "20")  # "2"
```

Behaviour to be aware of:

- `add` keeps leading zeros of its operands, because it adds column by column
  from the right: `add("007", "1")` gives `"008"`. `subtract`, `multiply` and
  `divide` return results without leading zeros.
- `subtract` returns a `-` prefix when the result is negative.
- `divide` returns the integer quotient. It raises `ZeroDivisionError` when
  the divisor is zero.
- Invalid operands raise `bigcalc.digits.InvalidNumberError`, a subclass of
  `ValueError`. An unknown operator passed to `evaluate` raises `ValueError`.

`bigcalc.digits` holds the helpers for digit sequences:

- `is_valid_number(text)`: whether `text` is a non-empty string of ASCII digits.
- `parse_digits(text)`: turns such a string into a list of ints, most
  significant first.
- `strip_leading_zeros(digits)`: drops leading zeros and keeps a single zero
  when every digit is zero.
- `format_digits(digits)`: turns a list of digits back into a string.

`bigcalc.cli` provides the `Operator` enumeration (`ADD`, `SUBTRACT`,
`MULTIPLY`, `DIVIDE`), `evaluate` and `main`.

## What it does not do

Only non-negative whole numbers can be given as operands. There are no
fractions, decimal points or signed inputs. Each run evaluates a single
operation; there is no interactive mode and no expression parsing.

## Running the tests

```
pip install .[test]
pytest
```