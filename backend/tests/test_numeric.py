"""Tests for numeric helpers (rounding policy, percent change, safe divide)."""

import math

import pytest

from alphacore.core.numeric import DEFAULT_PRECISION, percent_change, round_to, safe_divide


class TestRoundTo:
    """round_to uses half-away-from-zero, not banker's rounding."""

    def test_default_precision_is_four(self):
        assert DEFAULT_PRECISION == 4
        assert round_to(3.14159265) == 3.1416

    def test_basic(self):
        assert round_to(3.14159, 2) == 3.14

    @pytest.mark.parametrize(
        "value,precision,expected",
        [
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
            (0.5, 0, 1.0),
            (1.5, 0, 2.0),
            (0.125, 2, 0.13),
            (-0.125, 2, -0.13),
        ],
    )
    def test_ties_round_away_from_zero(self, value, precision, expected):
        assert round_to(value, precision) == expected

    def test_value_just_below_half_rounds_down(self):
        assert round_to(0.49999999999999994, 0) == 0.0

    def test_idempotent(self):
        for value in [1.23456789, -98.76543, 0.00005, 123456.78915, 1e-9]:
            once = round_to(value, 4)
            assert round_to(once, 4) == once

    def test_non_finite_passthrough(self):
        assert math.isnan(round_to(float("nan"), 4))
        assert round_to(float("inf"), 4) == float("inf")

    def test_huge_magnitude_returned_unchanged(self):
        assert round_to(1e305, 4) == 1e305
        assert round_to(-1.7e308, 2) == -1.7e308

    def test_precision_beyond_double_range(self):
        assert round_to(1.5, 400) == 1.5
        assert round_to(-2.25, 400) == -2.25


class TestPercentChange:
    def test_increase(self):
        assert percent_change(100.0, 110.0) == pytest.approx(10.0)

    def test_decrease(self):
        assert percent_change(200.0, 150.0) == pytest.approx(-25.0)

    def test_zero_base(self):
        assert percent_change(0.0, 50.0) == 0.0


class TestSafeDivide:
    def test_normal(self):
        assert safe_divide(10.0, 2.0, 0.0) == 5.0

    def test_zero_denominator_returns_default(self):
        assert safe_divide(10.0, 0.0, -1.0) == -1.0
