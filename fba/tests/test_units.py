"""
Unit Tests for FBA Unit Conversion

Tests display conversion, unit system switching and round trips.

Run with: pytest fba/tests/test_units.py -v
"""

import pytest

from fba.data import METRIC, IMPERIAL
from fba.models import Dimensions
from fba.units import (
    convert_dimensions,
    display_length,
    display_weight,
    length_unit,
    weight_unit,
    to_number,
)


class TestDisplayUnits:
    """Tests for display unit labels."""

    def test_metric_units(self):
        assert length_unit(METRIC) == "cm"
        assert weight_unit(METRIC) == "kg"

    def test_imperial_units(self):
        assert length_unit(IMPERIAL) == "in"
        assert weight_unit(IMPERIAL) == "lb"

    def test_unknown_unit_system_shows_imperial(self):
        assert length_unit("furlongs") == "in"
        assert weight_unit("furlongs") == "lb"


class TestDisplayValues:
    """Tests for converting canonical values back to the caller's units."""

    def test_inches_to_cm(self):
        assert display_length(15, METRIC) == pytest.approx(38.1, abs=1e-4)

    def test_pounds_to_kg(self):
        assert display_weight(20, METRIC) == pytest.approx(9.0718, abs=1e-4)

    def test_imperial_unchanged(self):
        assert display_length(15, IMPERIAL) == 15
        assert display_weight(20, IMPERIAL) == 20


class TestConvertDimensions:
    """Tests for switching an entry between unit systems."""

    def test_metric_to_imperial(self):
        converted = convert_dimensions(Dimensions(20, 15, 5, 0.5), METRIC, IMPERIAL)
        assert converted == Dimensions(7.87, 5.91, 1.97, 1.102)

    def test_imperial_to_metric(self):
        converted = convert_dimensions(Dimensions(10, 8, 2, 1), IMPERIAL, METRIC)
        assert converted == Dimensions(25.4, 20.32, 5.08, 0.454)

    def test_same_unit_unchanged(self):
        dims = Dimensions(20, 15, 5, 0.5)
        assert convert_dimensions(dims, METRIC, METRIC) is dims

    @pytest.mark.parametrize("dims", [
        Dimensions(25.4, 50.8, 12.7, 0.4536),
        Dimensions(38.1, 30.48, 1.905, 0.907),
        Dimensions(45.72, 35.56, 20.32, 9.072),
    ])
    def test_round_trip(self, dims):
        """metric -> imperial -> metric reproduces the entry."""
        back = convert_dimensions(convert_dimensions(dims, METRIC, IMPERIAL), IMPERIAL, METRIC)
        assert back.length == pytest.approx(dims.length, abs=0.01)
        assert back.width == pytest.approx(dims.width, abs=0.01)
        assert back.height == pytest.approx(dims.height, abs=0.01)
        assert back.weight == pytest.approx(dims.weight, abs=0.001)

    def test_garbage_converts_as_zero(self):
        converted = convert_dimensions(Dimensions("abc", None, float("nan"), 1), METRIC, IMPERIAL)
        assert converted == Dimensions(0.0, 0.0, 0.0, 2.205)


class TestToNumber:
    """Tests for reading raw values."""

    @pytest.mark.parametrize("raw, expected", [
        (12, 12.0),
        ("12.5", 12.5),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (-3, 0.0),
        ("-0.5", 0.0),
    ])
    def test_to_number(self, raw, expected):
        assert to_number(raw) == expected
