"""Encode integer vectors as JCAMP-DX data lines.

The compression forms are described in
IUPAC Pure Appl. Chem. 73 (2001) 1765, section 5.9:

- FIX: plain decimal values separated by blanks
- CSV: plain decimal values separated by commas
- PAC: values packed together, each carrying an explicit sign
- SQZ: sign and leading digit replaced by a pseudo-digit
- DIF: SQZ first value, then successive differences
- DIFDUP: DIF with runs of equal differences replaced by a repeat count

Every line begins with the abscissa of its first value, rounded up to an
integer. Lines are joined with CRLF and the result has no trailing newline.
"""

import logging
import math
from collections.abc import Callable, Sequence
from enum import Enum

import numpy as np

from jdxwriter.encoding.pseudo_digits import (
    difference_digit,
    duplicate_digit,
    format_number,
    squeezed_digit,
)

logger = logging.getLogger(__name__)

NEWLINE = "\r\n"
MAX_LINE_LENGTH = 100
FIX_VALUES_PER_LINE = 8
SQZ_VALUES_PER_LINE = 10


class Encoding(str, Enum):
    """Supported data compression forms."""

    FIX = "FIX"
    SQZ = "SQZ"
    DIF = "DIF"
    DIFDUP = "DIFDUP"
    CSV = "CSV"
    PAC = "PAC"


def _as_list(data) -> list:
    if isinstance(data, np.ndarray):
        return data.tolist()
    return list(data)


def _nominal_x(first_x: float, interval_x: float, index: int) -> int:
    return math.ceil(first_x + index * interval_x)


def _differences(values: list) -> list:
    return [b - a for a, b in zip(values, values[1:])]


def _grouped(
    values: list,
    first_x: float,
    interval_x: float,
    per_line: int,
    to_text: Callable[[object], str],
    separator: str = "",
) -> str:
    lines = []
    for start in range(0, len(values), per_line):
        chunk = values[start:start + per_line]
        lines.append(
            f"{_nominal_x(first_x, interval_x, start)}{separator}"
            + separator.join(to_text(value) for value in chunk)
        )
    return NEWLINE.join(lines)


def _signed(value) -> str:
    text = format_number(value)
    return text if text.startswith("-") else f"+{text}"


def _line_start(values: list, first_x: float, interval_x: float, index: int) -> str:
    return f"{_nominal_x(first_x, interval_x, index)}{squeezed_digit(values[index])}"


def fix_encoding(
    data: Sequence, first_x: float, interval_x: float, separator: str = " "
) -> str:
    """No compression, values separated by ``separator``, 8 per line."""
    return _grouped(
        _as_list(data), first_x, interval_x, FIX_VALUES_PER_LINE, format_number, separator
    )


def comma_separated_encoding(data: Sequence, first_x: float, interval_x: float) -> str:
    """No compression, values separated by commas."""
    return fix_encoding(data, first_x, interval_x, separator=",")


def packed_encoding(data: Sequence, first_x: float, interval_x: float) -> str:
    """No compression, values delimited by their own sign, 8 per line."""
    return _grouped(_as_list(data), first_x, interval_x, FIX_VALUES_PER_LINE, _signed)


def squeezed_encoding(data: Sequence, first_x: float, interval_x: float) -> str:
    """Squeezed form, 10 values per line.

    The values 30, 32 are written as ``C0C2``.
    """
    return _grouped(_as_list(data), first_x, interval_x, SQZ_VALUES_PER_LINE, squeezed_digit)


def difference_encoding(data: Sequence, first_x: float, interval_x: float) -> str:
    """Difference form.

    Each line holds the abscissa, the SQZ value of its first point and the
    DIF differences that follow it. When the next difference does not fit in
    MAX_LINE_LENGTH characters a new line is started at the point the
    difference leads away from, so that point appears at the end of one line
    and the start of the next (the Y-check value). The last value is repeated
    on its own closing line.
    """
    values = _as_list(data)
    if not values:
        return ""

    lines = []
    line = ""
    for index, diff in enumerate(_differences(values)):
        token = difference_digit(diff)
        if line and len(line) + len(token) <= MAX_LINE_LENGTH:
            line += token
            continue
        if line:
            lines.append(line)
        line = _line_start(values, first_x, interval_x, index) + token

    if line:
        lines.append(line)
    lines.append(_line_start(values, first_x, interval_x, len(values) - 1))
    return NEWLINE.join(lines)


def _runs(diffs: list) -> list[tuple[int, object, int]]:
    """Group consecutive equal differences as (start index, difference, length)."""
    runs = []
    for index, diff in enumerate(diffs):
        if runs and runs[-1][1] == diff:
            start, _, length = runs[-1]
            runs[-1] = (start, diff, length + 1)
        else:
            runs.append((index, diff, 1))
    return runs


def _fitting_repeats(used: int, token: str, length: int) -> int:
    """Largest repeat count of ``token`` whose DIF+DUP text fits after ``used`` chars."""
    room = MAX_LINE_LENGTH - used - len(token)
    if room < 0:
        return 0
    if length == 1 or len(duplicate_digit(length)) <= room:
        return length
    if room == 0:
        return 1
    return min(length, 10**room - 1)


def difference_duplicate_encoding(data: Sequence, first_x: float, interval_x: float) -> str:
    """Difference form with duplicate suppression.

    A run of equal differences is written once, followed by a DUP token
    holding the number of times it occurs. DUP tokens count toward the line
    budget; a run that does not fit is split and continued on the next line.
    """
    values = _as_list(data)
    if not values:
        return ""

    lines = []
    line = ""
    for start, diff, length in _runs(_differences(values)):
        token = difference_digit(diff)
        while length:
            repeats = _fitting_repeats(len(line), token, length) if line else 0
            if not repeats:
                if line:
                    lines.append(line)
                line = _line_start(values, first_x, interval_x, start)
                # A fresh line always takes at least one difference
                repeats = max(_fitting_repeats(len(line), token, length), 1)
            line += token
            if repeats > 1:
                line += duplicate_digit(repeats)
            start += repeats
            length -= repeats

    if line:
        lines.append(line)
    lines.append(_line_start(values, first_x, interval_x, len(values) - 1))
    return NEWLINE.join(lines)


_ENCODERS: dict[Encoding, Callable[[Sequence, float, float], str]] = {
    Encoding.FIX: fix_encoding,
    Encoding.SQZ: squeezed_encoding,
    Encoding.DIF: difference_encoding,
    Encoding.DIFDUP: difference_duplicate_encoding,
    Encoding.CSV: comma_separated_encoding,
    Encoding.PAC: packed_encoding,
}


def encode(
    data: Sequence,
    first_x: float,
    interval_x: float,
    encoding: str | Encoding = Encoding.DIF,
) -> str:
    """Encode an integer vector as JCAMP-DX data lines.

    Args:
        data: Integer values, already scaled (see jdxwriter.scaling.quantize)
        first_x: Abscissa of the first value
        interval_x: Constant abscissa increment between values
        encoding: One of FIX, SQZ, DIF, DIFDUP, CSV, PAC (case-sensitive).
            Anything else falls back to DIF.

    Returns:
        Encoded lines joined by CRLF, or an empty string for empty data
    """
    try:
        selected = Encoding(encoding)
    except ValueError:
        logger.debug(f"Unknown encoding {encoding!r}, falling back to DIF")
        selected = Encoding.DIF
    return _ENCODERS[selected](data, first_x, interval_x)
