"""Tests for pseudo-digit substitution."""

import numpy as np
import pytest

from jdxwriter.encoding.pseudo_digits import (
    PSEUDO_DIGITS,
    difference_digit,
    duplicate_digit,
    format_number,
    squeezed_digit,
)


class TestTable:
    """Tests for the pseudo-digit table."""

    def test_shape(self):
        """Test the table has six rows of ten characters."""
        assert len(PSEUDO_DIGITS) == 6
        assert all(len(row) == 10 for row in PSEUDO_DIGITS)

    def test_zero_shares_character_across_signs(self):
        """Test that +0 and -0 use the same pseudo-digit."""
        assert PSEUDO_DIGITS[1][0] == PSEUDO_DIGITS[2][0] == "@"
        assert PSEUDO_DIGITS[3][0] == PSEUDO_DIGITS[4][0] == "%"


class TestFormatNumber:
    """Tests for format_number."""

    def test_int(self):
        assert format_number(42) == "42"
        assert format_number(-7) == "-7"

    def test_integral_float(self):
        """Test integral floats print without a fractional part."""
        assert format_number(10.0) == "10"
        assert format_number(-3.0) == "-3"

    def test_numpy_int(self):
        assert format_number(np.int64(123456789012)) == "123456789012"

    def test_fractional_float(self):
        assert format_number(2.5) == "2.5"

    def test_small_fraction_has_no_exponent(self):
        """Test tiny values are written positionally, never as 1e-05."""
        assert format_number(1e-05) == "0.00001"
        assert format_number(-2.5e-07) == "-0.00000025"
        assert squeezed_digit(1e-05) == "@.00001"


class TestSqueezedDigit:
    """Tests for SQZ substitution."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "@"), (1, "A"), (9, "I"), (30, "C0"), (32, "C2"), (-1, "a"), (-25, "b5"), (-900, "i00")],
    )
    def test_values(self, value, expected):
        assert squeezed_digit(value) == expected

    def test_fraction_kept_verbatim(self):
        assert squeezed_digit(-2.5) == "b.5"


class TestDifferenceDigit:
    """Tests for DIF substitution."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "%"), (1, "J"), (9, "R"), (12, "J2"), (-3, "l"), (-120, "j20")],
    )
    def test_values(self, value, expected):
        assert difference_digit(value) == expected


class TestDuplicateDigit:
    """Tests for DUP substitution."""

    @pytest.mark.parametrize(
        "count,expected",
        [(1, "S"), (2, "T"), (9, "s"), (10, "S0"), (999, "s99")],
    )
    def test_values(self, count, expected):
        assert duplicate_digit(count) == expected

    def test_zero_count_raises(self):
        with pytest.raises(ValueError, match="positive"):
            duplicate_digit(0)
