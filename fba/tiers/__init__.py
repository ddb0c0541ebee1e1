"""
Size Tiers Package

Exports all size tier classes and helpers.

Classification Order:
    Tiers are evaluated by priority (lowest number first). The first tier
    whose thresholds hold wins, so the smallest applicable tier is always
    assigned. The last tier is a catch-all, which makes classification total.
"""

import polars as pl

from shared.tiers import SizeTier, sorted_sides
from .small_standard import SmallStandard
from .large_standard import LargeStandard
from .oversize import Oversize
from ..data.reference.units import IN_TO_CM, LB_TO_KG
from ..data.reference.fee_schedule import (
    SMALL_STANDARD_FEE,
    LARGE_STANDARD_BRACKETS,
    OVERSIZE_BASE_FEE,
)


# All tiers, in evaluation order
ALL = sorted([SmallStandard, LargeStandard, Oversize], key=lambda t: t.priority)


# =============================================================================
# HELPERS
# =============================================================================

def get_tier(name: str) -> type[SizeTier]:
    """Get a tier class by its short code (e.g., "LARGE_STANDARD")."""
    for tier in ALL:
        if tier.name == name:
            return tier
    raise KeyError(f"Unknown size tier: {name}")


def _as_float(value: float | None) -> float | None:
    return None if value is None else float(value)


def tier_reference() -> pl.DataFrame:
    """
    Size tier reference table.

    Returns:
        DataFrame with one row per tier (evaluation order) and columns:
            - size_tier, label
            - max_longest_in, max_median_in, max_shortest_in, max_weight_lbs
            - max_longest_cm, max_median_cm, max_shortest_cm, max_weight_kg
            - starting_fee: Lowest non-apparel fee in the tier
    """
    starting_fees = {
        SmallStandard.name: SMALL_STANDARD_FEE,
        LargeStandard.name: LARGE_STANDARD_BRACKETS[0][1],
        Oversize.name: OVERSIZE_BASE_FEE,
    }

    rows = []
    for tier in ALL:
        row = {
            "size_tier": tier.name,
            "label": tier.label,
            "max_longest_in": _as_float(tier.LONGEST_IN),
            "max_median_in": _as_float(tier.MEDIAN_IN),
            "max_shortest_in": _as_float(tier.SHORTEST_IN),
            "max_weight_lbs": _as_float(tier.WEIGHT_LBS),
            "starting_fee": starting_fees[tier.name],
        }
        rows.append(row)

    return (
        pl.DataFrame(rows, schema={
            "size_tier": pl.Utf8,
            "label": pl.Utf8,
            "max_longest_in": pl.Float64,
            "max_median_in": pl.Float64,
            "max_shortest_in": pl.Float64,
            "max_weight_lbs": pl.Float64,
            "starting_fee": pl.Float64,
        })
        .with_columns([
            (pl.col("max_longest_in") * IN_TO_CM).round(1).alias("max_longest_cm"),
            (pl.col("max_median_in") * IN_TO_CM).round(1).alias("max_median_cm"),
            (pl.col("max_shortest_in") * IN_TO_CM).round(1).alias("max_shortest_cm"),
            (pl.col("max_weight_lbs") * LB_TO_KG).round(2).alias("max_weight_kg"),
        ])
    )


# =============================================================================
# VALIDATION
# =============================================================================

def validate_tiers() -> None:
    """
    Validate size tier configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    names = [t.name for t in ALL]
    for name in sorted({n for n in names if names.count(n) > 1}):
        errors.append(f"{name}: name used by more than one tier")

    priorities = [t.priority for t in ALL]
    for priority in sorted({p for p in priorities if priorities.count(p) > 1}):
        errors.append(f"priority {priority} used by more than one tier")

    catch_all = [t for t in ALL if t.is_catch_all()]
    if len(catch_all) != 1:
        errors.append(f"expected exactly one catch-all tier, found {len(catch_all)}")
    elif catch_all[0] is not ALL[-1]:
        errors.append(f"{catch_all[0].name}: catch-all tier must be evaluated last")

    # A stricter tier must not be looser than the next one on any attribute
    for stricter, looser in zip(ALL, ALL[1:]):
        if looser.is_catch_all():
            continue
        looser_limits = {col: limit for _, col, limit in looser.limits()}
        for _, col, limit in stricter.limits():
            if col in looser_limits and limit > looser_limits[col]:
                errors.append(
                    f"{stricter.name}: {col} limit {limit} exceeds {looser.name} limit {looser_limits[col]}"
                )

    if errors:
        raise ValueError("Size tier configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_tiers()

__all__ = [
    # Base
    "SizeTier",
    "sorted_sides",
    # Tier classes
    "SmallStandard",
    "LargeStandard",
    "Oversize",
    # Lists
    "ALL",
    # Helpers
    "get_tier",
    "tier_reference",
    "validate_tiers",
]
