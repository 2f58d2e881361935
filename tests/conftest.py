"""Pytest configuration and fixtures for jdxwriter tests."""

import re

import numpy as np
import pytest

_ROWS = {
    "@ABCDEFGHI": ("sqz", 1),
    "@abcdefghi": ("sqz", -1),
    "%JKLMNOPQR": ("dif", 1),
    "%jklmnopqr": ("dif", -1),
    " STUVWXYZs": ("dup", 1),
}
_PSEUDO = {}
for _row, (_kind, _sign) in _ROWS.items():
    for _digit, _char in enumerate(_row):
        if _char != " ":
            _PSEUDO.setdefault(_char, (_kind, _sign, _digit))

_ABSCISSA = re.compile(r"-?\d+")
_TOKEN = re.compile(r"([@A-Ia-i%J-Rj-rS-Zs])(\d*)")


def decode_asdf(text: str) -> tuple[list[int], list[tuple[int, int]]]:
    """Decode SQZ/DIF/DUP lines.

    Returns the decoded values and, for every line, its leading abscissa
    with the index of the value it belongs to. The first value of a line
    following a DIF line is checked against the previous value and dropped.
    """
    values: list[int] = []
    abscissas: list[tuple[int, int]] = []
    after_dif = False

    for line in text.split("\r\n"):
        match = _ABSCISSA.match(line)
        assert match, f"Line has no abscissa: {line!r}"
        abscissas.append((int(match.group()), len(values) - 1 if after_dif else len(values)))

        line_values: list[int] = []
        last = None
        for char, rest in _TOKEN.findall(line[match.end():]):
            kind, sign, digit = _PSEUDO[char]
            number = sign * int(f"{digit}{rest}")
            if kind == "sqz":
                line_values.append(number)
                last = (kind, number)
            elif kind == "dif":
                line_values.append(line_values[-1] + number)
                last = (kind, number)
            else:
                for _ in range(number - 1):
                    if last[0] == "dif":
                        line_values.append(line_values[-1] + last[1])
                    else:
                        line_values.append(last[1])

        if after_dif:
            assert line_values[0] == values[-1], f"Y-check failed on line {line!r}"
            line_values = line_values[1:]
        values.extend(line_values)
        after_dif = last is not None and last[0] == "dif"

    return values, abscissas


@pytest.fixture
def asdf_decoder():
    """Reference decoder for SQZ, DIF and DIFDUP output."""
    return decode_asdf


@pytest.fixture
def noisy_spectrum():
    """Smooth peak with noise, as float samples."""
    rng = np.random.default_rng(42)
    x = np.linspace(0, 10, 500)
    y = 1000 * np.exp(-((x - 5) ** 2)) + rng.normal(0, 3, len(x))
    return x, y


@pytest.fixture
def integer_ramp():
    """Integer samples with a constant slope and flat stretches."""
    return [0] * 20 + list(range(0, 300, 3)) + [300] * 50 + [7, -7, 7, -7]
