"""Pseudo-digit substitution for the JCAMP-DX ASDF compression forms.

The ASDF forms replace the sign and leading digit of every number with a
single character, so values can be written without separators. See
IUPAC Pure Appl. Chem. 73 (2001) 1765, Table 1.
"""

import numbers

import numpy as np

PSEUDO_DIGITS: tuple[str, ...] = (
    "0123456789",
    "@ABCDEFGHI",
    "@abcdefghi",
    "%JKLMNOPQR",
    "%jklmnopqr",
    " STUVWXYZs",
)

SQZ_POSITIVE = 1
SQZ_NEGATIVE = 2
DIF_POSITIVE = 3
DIF_NEGATIVE = 4
DUP = 5


def format_number(value) -> str:
    """Decimal text of a value, without a fractional part when integral."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return np.format_float_positional(value, trim="-")


def _substitute(text: str, positive_row: int, negative_row: int) -> str:
    if text.startswith("-"):
        return PSEUDO_DIGITS[negative_row][int(text[1])] + text[2:]
    return PSEUDO_DIGITS[positive_row][int(text[0])] + text[1:]


def squeezed_digit(value) -> str:
    """Encode an absolute value in SQZ form, e.g. 30 -> 'C0', -25 -> 'b5'."""
    return _substitute(format_number(value), SQZ_POSITIVE, SQZ_NEGATIVE)


def difference_digit(value) -> str:
    """Encode a difference in DIF form, e.g. 12 -> 'J2', -3 -> 'l'."""
    return _substitute(format_number(value), DIF_POSITIVE, DIF_NEGATIVE)


def duplicate_digit(count: int) -> str:
    """Encode a repeat count in DUP form, e.g. 2 -> 'T', 10 -> 'S0'."""
    if count < 1:
        raise ValueError(f"Duplicate count must be positive, got {count}")
    text = str(count)
    return PSEUDO_DIGITS[DUP][int(text[0])] + text[1:]
