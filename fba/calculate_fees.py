"""
FBA Fulfillment Fee Calculator

DataFrame in, DataFrame out. The input can come from any source (form
fields, CSV, manual creation) as long as it contains the required columns.
The output is the same DataFrame with calculation columns and the fee
appended. calculate_fee() wraps the pipeline for a single item and adds the
savings analysis.

REQUIRED INPUT COLUMNS
----------------------
    length              - Side as entered (cm or in)
    width               - Side as entered (cm or in)
    height              - Side as entered (cm or in)
    weight              - Actual weight as entered (kg or lb)
    unit_system         - "metric" or "imperial" (anything else reads as imperial)

OPTIONAL INPUT COLUMNS
----------------------
    is_apparel          - Apparel/footwear flag (defaults to False)

OUTPUT COLUMNS ADDED
--------------------
    supplement_items() adds:
        - length_in, width_in, height_in, weight_lbs
        - longest_side_in, median_side_in, shortest_side_in
        - dim_weight_lbs

    calculate() adds:
        - tier_* flags (small_standard, large_standard, oversize)
        - size_tier, tier_label
        - uses_dim_weight, billable_weight_lbs
        - cost_fulfillment
        - calculator_version

USAGE
-----
    from fba.calculate_fees import calculate_fee
    result = calculate_fee(Dimensions(20, 15, 5, 0.5), "metric")
"""

import polars as pl

from .version import VERSION
from .data import DIM_FACTOR, FACTOR_FIELDS, METRIC
from .fees import fee_expr
from .models import Dimensions, FeeResult, UnitSystem
from .savings import find_savings
from .tiers import ALL, SmallStandard, LargeStandard, Oversize, sorted_sides
from .units import length_to_inches, weight_to_lbs


REQUIRED_INPUT_COLS = ["length", "width", "height", "weight", "unit_system"]


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_fee(
    dims: Dimensions,
    unit: UnitSystem = METRIC,
    is_apparel: bool = False,
) -> FeeResult:
    """
    Calculate the fulfillment fee and saving opportunities for one item.

    Pure function of its inputs. Non-numeric, non-finite or negative values
    in dims are priced as zero.

    Args:
        dims: Item sides and actual weight, in the caller's unit system
        unit: Unit system dims is expressed in
        is_apparel: True for apparel and footwear

    Returns:
        FeeResult with tier, fee, weights, notes and saving opportunities
    """
    item = calculate_costs(pl.DataFrame({
        "length": [dims.length],
        "width": [dims.width],
        "height": [dims.height],
        "weight": [dims.weight],
        "unit_system": [unit],
        "is_apparel": [bool(is_apparel)],
    })).row(0, named=True)

    return FeeResult(
        size_tier=item["size_tier"],
        tier_label=item["tier_label"],
        fulfillment_fee=item["cost_fulfillment"],
        dimensional_weight=item["dim_weight_lbs"],
        shipping_weight=item["billable_weight_lbs"],
        details=tuple(tier_details(item)),
        potential_savings=tuple(find_savings(item)),
        calculator_version=item["calculator_version"],
    )


def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate fulfillment fees for an item DataFrame.

    Takes raw item data and returns the same DataFrame with all calculation
    columns and the fee appended.

    Args:
        df: Raw item DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, tier flags, and fees
    """
    df = supplement_items(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT ITEMS
# =============================================================================

def supplement_items(df: pl.DataFrame) -> pl.DataFrame:
    """
    Supplement item data with canonical units and derived dimensions.

    Args:
        df: Raw item DataFrame

    Returns:
        DataFrame with added columns:
            - length_in, width_in, height_in, weight_lbs
            - longest_side_in, median_side_in, shortest_side_in
            - dim_weight_lbs

    Raises:
        ValueError: If required input columns are missing
    """
    _validate_input_columns(df)

    df = _normalize_units(df)
    df = _add_sorted_sides(df)
    df = _add_dim_weight(df)

    return df


def _validate_input_columns(df: pl.DataFrame) -> None:
    """Fail on missing input columns instead of pricing garbage silently."""
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing required input column(s): {', '.join(missing)}. "
            f"Expected: {', '.join(REQUIRED_INPUT_COLS)}."
        )


def _normalize_units(df: pl.DataFrame) -> pl.DataFrame:
    """
    Express sides in inches and weight in pounds.

    Values are not rounded. Unusable values (null, NaN, inf, text) read as 0.
    """
    if "is_apparel" not in df.columns:
        df = df.with_columns(pl.lit(False).alias("is_apparel"))

    return df.with_columns([
        length_to_inches("length").alias("length_in"),
        length_to_inches("width").alias("width_in"),
        length_to_inches("height").alias("height_in"),
        weight_to_lbs("weight").alias("weight_lbs"),
        pl.col("is_apparel").cast(pl.Boolean, strict=False).fill_null(False),
    ])


def _add_sorted_sides(df: pl.DataFrame) -> pl.DataFrame:
    """Add the sides sorted longest first."""
    sides = sorted_sides("length_in", "width_in", "height_in")
    return df.with_columns([
        sides.list.get(0).alias("longest_side_in"),
        sides.list.get(1).alias("median_side_in"),
        sides.list.get(2).alias("shortest_side_in"),
    ])


def _add_dim_weight(df: pl.DataFrame) -> pl.DataFrame:
    """Dimensional weight: product of the sorted sides over DIM_FACTOR."""
    volume = pl.col(FACTOR_FIELDS[0])
    for field in FACTOR_FIELDS[1:]:
        volume = volume * pl.col(field)
    return df.with_columns((volume / DIM_FACTOR).alias("dim_weight_lbs"))


# =============================================================================
# CALCULATE FEES
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate fulfillment fees for supplemented items.

    Args:
        df: Supplemented item DataFrame from supplement_items

    Returns:
        DataFrame with tier flags, billable weight, and fee

    Processing order:
        1. Size tier       - first matching tier by priority
        2. Billable weight - depends on the tier
        3. Fee             - tier fee at billable weight
    """
    df = _apply_size_tiers(df)
    df = _add_billable_weight(df)
    df = _calculate_fee(df)
    df = _stamp_version(df)

    return df


def _apply_size_tiers(df: pl.DataFrame) -> pl.DataFrame:
    """
    Flag the size tier of every item.

    Tiers compete in priority order - a tier applies only if its thresholds
    hold AND no stricter tier already matched. The catch-all tier last makes
    the flags exhaustive, so exactly one is set per item.
    """
    exclusion_mask = pl.lit(False)

    for tier in ALL:
        applies = tier.conditions() & ~exclusion_mask
        df = df.with_columns(applies.alias(tier.flag_col()))
        exclusion_mask = exclusion_mask | pl.col(tier.flag_col())

    *flagged, catch_all = ALL
    size_tier = pl.when(pl.col(flagged[0].flag_col())).then(pl.lit(flagged[0].name))
    tier_label = pl.when(pl.col(flagged[0].flag_col())).then(pl.lit(flagged[0].label))
    for tier in flagged[1:]:
        size_tier = size_tier.when(pl.col(tier.flag_col())).then(pl.lit(tier.name))
        tier_label = tier_label.when(pl.col(tier.flag_col())).then(pl.lit(tier.label))

    return df.with_columns([
        size_tier.otherwise(pl.lit(catch_all.name)).alias("size_tier"),
        tier_label.otherwise(pl.lit(catch_all.label)).alias("tier_label"),
    ])


def _add_billable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate billable weight.

    Tiers with uses_dim_weight bill the greater of actual and dimensional
    weight; the others (small standard-size) bill actual weight.
    """
    dim_tier = pl.lit(False)
    for tier in ALL:
        if tier.uses_dim_weight:
            dim_tier = dim_tier | pl.col(tier.flag_col())

    return df.with_columns([
        (dim_tier & (pl.col("dim_weight_lbs") > pl.col("weight_lbs")))
        .alias("uses_dim_weight"),

        pl.when(dim_tier)
        .then(pl.max_horizontal("weight_lbs", "dim_weight_lbs"))
        .otherwise(pl.col("weight_lbs"))
        .alias("billable_weight_lbs"),
    ])


def _calculate_fee(df: pl.DataFrame) -> pl.DataFrame:
    """Fulfillment fee for the assigned tier at billable weight."""
    return df.with_columns(fee_expr().alias("cost_fulfillment"))


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# DETAIL NOTES
# =============================================================================

def tier_details(item: dict) -> list[str]:
    """Human-readable notes on how one calculated item was priced."""
    if item["size_tier"] == SmallStandard.name:
        return ["Qualifies for the lowest fee tier."]

    if item["size_tier"] == LargeStandard.name:
        return [
            f"Billable weight: {item['billable_weight_lbs']:.2f} lb "
            f"(greater of actual and dimensional weight)"
        ]

    if item["size_tier"] == Oversize.name:
        return ["Exceeds standard-size limits."]

    return []


__all__ = [
    "calculate_fee",
    "calculate_costs",
    "supplement_items",
    "calculate",
    "tier_details",
    "REQUIRED_INPUT_COLS",
]
