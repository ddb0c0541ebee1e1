"""
Unit Tests for FBA Savings Advisor

Tests dimension downgrades, weight bracket suggestions, requirement
targets in the caller's units, and the minimum saving filter.

Run with: pytest fba/tests/test_savings.py -v
"""

import pytest
import polars as pl

import fba.savings
from fba.calculate_fees import calculate_fee, calculate_costs
from fba.data import SAVINGS_EPSILON
from fba.models import Dimensions, Requirement
from fba.savings import find_savings


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def metric_large_standard():
    """20 x 15 x 5 cm, 0.5 kg - large standard billed at 1.10 lb."""
    return calculate_fee(Dimensions(20, 15, 5, 0.5), "metric")


@pytest.fixture
def metric_oversize():
    """60 x 40 x 25 cm, 12 kg - oversize on every attribute."""
    return calculate_fee(Dimensions(60, 40, 25, 12), "metric")


def savings_by_kind(result) -> dict:
    return {s.kind: s for s in result.potential_savings}


# =============================================================================
# SMALL STANDARD
# =============================================================================

class TestSmallStandard:
    """Small standard-size is already the cheapest tier."""

    def test_no_savings(self):
        result = calculate_fee(Dimensions(15, 12, 0.75, 1), "imperial")
        assert result.potential_savings == ()

    def test_no_savings_for_apparel(self):
        result = calculate_fee(Dimensions(15, 12, 0.75, 1), "imperial", is_apparel=True)
        assert result.potential_savings == ()


# =============================================================================
# LARGE STANDARD
# =============================================================================

class TestLargeStandardDowngrade:
    """Tests for shrinking a large standard-size item into small standard."""

    def test_both_opportunities_offered(self, metric_large_standard):
        """Dimension change listed before the weight change."""
        kinds = [s.kind for s in metric_large_standard.potential_savings]
        assert kinds == ["DIMENSION", "WEIGHT"]

    def test_target_fee_is_small_standard_fee(self, metric_large_standard):
        saving = savings_by_kind(metric_large_standard)["DIMENSION"]
        assert saving.target_tier == "Downgrade to small standard"
        assert saving.current_fee == pytest.approx(4.54)
        assert saving.target_fee == pytest.approx(3.22)
        assert saving.saving_amount == pytest.approx(1.32)

    def test_apparel_target_fee(self):
        result = calculate_fee(Dimensions(20, 15, 5, 0.5), "metric", is_apparel=True)
        saving = savings_by_kind(result)["DIMENSION"]
        assert saving.target_fee == pytest.approx(3.45)
        assert saving.saving_amount == pytest.approx(4.54 - 3.45)

    def test_requirements_in_metric(self, metric_large_standard):
        """Thresholds shown in cm/kg, checked against canonical values."""
        saving = savings_by_kind(metric_large_standard)["DIMENSION"]
        assert saving.requirements == (
            Requirement("Longest side", 38.1, "cm", True),
            Requirement("Median side", 30.5, "cm", True),
            Requirement("Shortest side", 1.9, "cm", False),
            Requirement("Weight", 0.45, "kg", False),
        )

    def test_requirements_in_imperial(self):
        """Thresholds shown in in/lb for imperial entries."""
        result = calculate_fee(Dimensions(16, 10, 0.5, 0.8), "imperial")
        saving = savings_by_kind(result)["DIMENSION"]
        assert saving.requirements == (
            Requirement("Longest side", 15.0, "in", False),
            Requirement("Median side", 12.0, "in", True),
            Requirement("Shortest side", 0.75, "in", True),
            Requirement("Weight", 1.0, "lb", True),
        )

    def test_current_status_shows_entry(self, metric_large_standard):
        saving = savings_by_kind(metric_large_standard)["DIMENSION"]
        assert saving.current_status == "Large standard (20*15*5cm, 0.5kg)"

    def test_current_status_keeps_entered_precision(self):
        """Entered values are echoed without losing digits."""
        result = calculate_fee(Dimensions(20.123456, 15, 5, 0.5), "metric")
        saving = savings_by_kind(result)["DIMENSION"]
        assert saving.current_status == "Large standard (20.123456*15*5cm, 0.5kg)"

    def test_current_status_large_values_not_abbreviated(self):
        result = calculate_fee(Dimensions(1234567, 10, 10, 1), "imperial")
        saving = result.potential_savings[0]
        assert saving.current_status == "Oversize (1234567*10*10in, 1lb)"


class TestWeightBracket:
    """Tests for dropping into the next lower large standard weight bracket."""

    def test_next_lower_bracket(self, metric_large_standard):
        """1.10 lb drops to the 1 lb bracket."""
        saving = savings_by_kind(metric_large_standard)["WEIGHT"]
        assert saving.target_tier == "Optimize weight within current tier"
        assert saving.target_fee == pytest.approx(4.08)
        assert saving.saving_amount == pytest.approx(0.46)
        assert saving.current_status == "Billable weight 1.10 lb"

    def test_requirement_in_caller_units(self, metric_large_standard):
        saving = savings_by_kind(metric_large_standard)["WEIGHT"]
        (requirement,) = saving.requirements
        assert requirement == Requirement("Billable weight", 0.45, "kg", False, "<")
        assert requirement.display == "< 0.45kg"

    def test_above_3_lb_drops_to_3_lb(self):
        """Stepped fees above 3 lb fall back to the 3 lb bracket."""
        result = calculate_fee(Dimensions(10, 8, 6, 5), "imperial")
        saving = savings_by_kind(result)["WEIGHT"]
        assert result.fulfillment_fee == pytest.approx(6.82)
        assert saving.target_fee == pytest.approx(5.60)
        assert saving.requirements[0].display == "< 3lb"

    def test_exact_bracket_boundary_drops_a_bracket(self):
        """At exactly 2 lb the next lower ceiling is 1.5 lb."""
        result = calculate_fee(Dimensions(10, 8, 1, 2), "imperial")
        saving = savings_by_kind(result)["WEIGHT"]
        assert result.fulfillment_fee == pytest.approx(5.05)
        assert saving.target_fee == pytest.approx(4.54)

    def test_lowest_bracket_has_no_weight_saving(self):
        """Billable weight <= 0.5 lb has nowhere lower to go."""
        # 16 x 4 x 1 in: dim weight 64 / 139 = 0.46 lb
        result = calculate_fee(Dimensions(16, 4, 1, 0.3), "imperial")
        assert result.shipping_weight <= 0.5
        assert [s.kind for s in result.potential_savings] == ["DIMENSION"]

    def test_billable_weight_uses_dim_weight(self):
        """Bracket search starts from billable, not actual, weight."""
        # 18 x 14 x 8 in: dim weight 14.5 lb, actual 2 lb
        result = calculate_fee(Dimensions(18, 14, 8, 2), "imperial")
        saving = savings_by_kind(result)["WEIGHT"]
        assert saving.current_status == f"Billable weight {2016 / 139:.2f} lb"
        assert saving.target_fee == pytest.approx(5.60)


# =============================================================================
# OVERSIZE
# =============================================================================

class TestOversizeDowngrade:
    """Tests for shrinking an oversize item into large standard."""

    def test_single_dimension_opportunity(self, metric_oversize):
        assert [s.kind for s in metric_oversize.potential_savings] == ["DIMENSION"]

    def test_priced_at_large_standard_max_weight(self, metric_oversize):
        """Target fee is the large standard fee at 20 lb."""
        saving = metric_oversize.potential_savings[0]
        assert saving.target_tier == "Downgrade to large standard"
        assert saving.target_fee == pytest.approx(9.22)
        assert saving.saving_amount == pytest.approx(metric_oversize.fulfillment_fee - 9.22)

    def test_apparel_priced_with_surcharge(self):
        result = calculate_fee(Dimensions(60, 40, 25, 12), "metric", is_apparel=True)
        assert result.potential_savings[0].target_fee == pytest.approx(10.22)

    def test_requirements_in_metric(self, metric_oversize):
        saving = metric_oversize.potential_savings[0]
        assert saving.requirements == (
            Requirement("Longest side", 45.7, "cm", False),
            Requirement("Median side", 35.6, "cm", False),
            Requirement("Shortest side", 20.3, "cm", False),
            Requirement("Weight", 9.07, "kg", False),
        )

    def test_only_unmet_attributes_flagged(self):
        """An item too long but light enough meets the other limits."""
        result = calculate_fee(Dimensions(24, 10, 6, 5), "imperial")
        requirements = result.potential_savings[0].requirements
        assert [r.is_met for r in requirements] == [False, True, True, True]
        assert requirements[0].display == "<= 18in"


# =============================================================================
# MINIMUM SAVING
# =============================================================================

class TestMinimumSaving:
    """Tests for dropping savings that are not worth suggesting."""

    def test_no_saving_at_or_below_epsilon(self):
        """Across a spread of items every suggestion saves more than a cent."""
        df = calculate_costs(pl.DataFrame({
            "length": [16.0, 16.0, 17.0, 18.0, 30.0, 10.0, 12.0, 40.0],
            "width": [4.0, 10.0, 13.0, 14.0, 20.0, 8.0, 11.0, 30.0],
            "height": [1.0, 2.0, 7.0, 8.0, 10.0, 6.0, 3.0, 20.0],
            "weight": [0.3, 0.6, 12.0, 20.0, 40.0, 5.0, 1.4, 0.1],
            "unit_system": ["imperial"] * 8,
            "is_apparel": [False, True, True, False, False, True, False, True],
        }))
        for row in df.iter_rows(named=True):
            for saving in find_savings(row):
                assert saving.saving_amount > SAVINGS_EPSILON

    def test_small_savings_dropped(self, monkeypatch):
        """Savings not exceeding the threshold are filtered out."""
        monkeypatch.setattr(fba.savings, "SAVINGS_EPSILON", 0.5)
        result = calculate_fee(Dimensions(20, 15, 5, 0.5), "metric")
        # Weight saving is $0.46, dimension saving $1.32
        assert [s.kind for s in result.potential_savings] == ["DIMENSION"]
