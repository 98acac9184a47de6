"""
Core test suite for numeric transforms: clamp, precision rounding, normalization,
interpolation, significant digits and order of magnitude.
"""

import math

import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from polynum.errors import NumberFormatError
from polynum.numeric import (
    clamp,
    interpolate,
    normalize,
    order_of_magnitude,
    round_to_precision,
    to_significant_digits,
)
from polynum.options import RoundingMode


class TestClamp:
    """Restrict values to closed bounds."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(5, 5, id="inside"),
            pytest.param(-5, 0, id="below"),
            pytest.param(15, 10, id="above"),
            pytest.param(0, 0, id="on-min"),
            pytest.param(10, 10, id="on-max"),
        ],
    )
    def test_clamp(self, value, expected):
        assert clamp(value, 0, 10) == expected

    def test_decimal_values(self):
        assert clamp(3.14, 2.5, 3.5) == 3.14
        assert clamp(2.4, 2.5, 3.5) == 2.5

    @pytest.mark.parametrize(
        "args",
        [
            pytest.param((math.nan, 0, 10), id="value"),
            pytest.param((5, math.nan, 10), id="min"),
            pytest.param((5, 0, math.inf), id="max"),
        ],
    )
    def test_invalid_raises(self, args):
        with pytest.raises(NumberFormatError):
            clamp(*args)


class TestRoundToPrecision:
    """Rounding modes and precision validation."""

    @pytest.mark.parametrize(
        "value, mode, expected",
        [
            pytest.param(3.14159, "round", 3.14, id="round"),
            pytest.param(3.14159, "ceil", 3.15, id="ceil"),
            pytest.param(3.14159, "floor", 3.14, id="floor"),
            pytest.param(3.14159, "trunc", 3.14, id="trunc"),
            pytest.param(-3.14159, "round", -3.14, id="neg-round"),
            pytest.param(-3.14159, "ceil", -3.14, id="neg-ceil"),
            pytest.param(-3.14159, "floor", -3.15, id="neg-floor"),
            pytest.param(-3.14159, "trunc", -3.14, id="neg-trunc"),
        ],
    )
    def test_modes(self, value, mode, expected):
        assert round_to_precision(value, 2, mode) == expected

    def test_enum_mode(self):
        assert round_to_precision(2.71828, 3, RoundingMode.FLOOR) == 2.718

    def test_default_precision_zero(self):
        assert round_to_precision(2.6) == 3

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(2.5, 3, id="positive-half"),
            pytest.param(-2.5, -2, id="negative-half-toward-plus-inf"),
        ],
    )
    def test_halves_go_up(self, value, expected):
        assert round_to_precision(value, 0) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(4503599627370497, 4503599627370497, id="odd-whole-above-2**52"),
            pytest.param(2 ** 52 + 3.0, 2 ** 52 + 3, id="odd-whole-float-above-2**52"),
            pytest.param(0.49999999999999994, 0, id="just-below-half"),
            pytest.param(-0.49999999999999994, 0, id="neg-just-below-half"),
        ],
    )
    def test_nearest_without_sum_rounding(self, value, expected):
        assert round_to_precision(value, 0) == expected

    @pytest.mark.parametrize("value", [3.14159, -2.71828, 1234.5678, 0.005, 1e6 / 7])
    def test_idempotent(self, value):
        once = round_to_precision(value, 2)
        assert round_to_precision(once, 2) == once

    def test_huge_value_passthrough(self):
        assert round_to_precision(1e300, 20) == 1e300

    def test_invalid_raises(self):
        with pytest.raises(NumberFormatError):
            round_to_precision(math.nan, 2)
        with pytest.raises(NumberFormatError, match="precision"):
            round_to_precision(3.14, -1)
        with pytest.raises(NumberFormatError, match="rounding mode"):
            round_to_precision(3.14, 1, "banker")


class TestNormalizeInterpolate:
    """Min-max normalization and its inverse."""

    def test_normalize(self):
        assert normalize(5, 0, 10) == 0.5
        assert normalize(0, 0, 10) == 0
        assert normalize(10, 0, 10) == 1

    def test_normalize_not_clamped(self):
        assert normalize(15, 0, 10) == 1.5
        assert normalize(-5, 0, 10) == -0.5

    def test_normalize_bad_bounds(self):
        with pytest.raises(NumberFormatError, match="less than max"):
            normalize(5, 10, 10)
        with pytest.raises(NumberFormatError):
            normalize(5, 10, 0)

    def test_interpolate(self):
        assert interpolate(0, 10, 0.5) == 5
        assert interpolate(10, 20, 0) == 10
        assert interpolate(10, 20, 1) == 20
        assert interpolate(20, 10, 0.25) == 17.5

    @pytest.mark.parametrize("factor", [-0.1, 1.1, math.nan])
    def test_interpolate_factor_out_of_bounds(self, factor):
        with pytest.raises(NumberFormatError):
            interpolate(0, 10, factor)

    @pytest.mark.parametrize("value", [-3.0, 0.0, 1.25, 7.5, 12.0])
    def test_inverse(self, value):
        lo, hi = -3.0, 12.0
        assert interpolate(lo, hi, normalize(value, lo, hi)) == pytest.approx(value)


class TestSignificantDigits:

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            pytest.param(1234.567, 3, 1230, id="large"),
            pytest.param(0.0001234, 3, 0.000123, id="small"),
            pytest.param(-98765, 2, -99000, id="negative"),
            pytest.param(2.5, 1, 3, id="half-away"),
            pytest.param(0, 4, 0, id="zero"),
        ],
    )
    def test_round(self, value, digits, expected):
        assert to_significant_digits(value, digits) == expected

    @pytest.mark.parametrize("digits", [0, -1, 1.5, True])
    def test_bad_digits(self, digits):
        with pytest.raises(NumberFormatError, match="positive integer"):
            to_significant_digits(1.5, digits)

    def test_bad_value(self):
        with pytest.raises(NumberFormatError):
            to_significant_digits(math.inf, 2)


class TestOrderOfMagnitude:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(1234, 3),
            pytest.param(0.001234, -3),
            pytest.param(1, 0),
            pytest.param(10, 1),
            pytest.param(0.1, -1),
            pytest.param(-500, 2),
        ],
    )
    def test_magnitude(self, value, expected):
        assert order_of_magnitude(value) == expected

    @pytest.mark.parametrize("value", [0, math.nan, math.inf])
    def test_invalid(self, value):
        with pytest.raises(NumberFormatError):
            order_of_magnitude(value)
