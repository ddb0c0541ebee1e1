"""
Unit Normalization

Converts caller-supplied values into inches and pounds for every comparison,
and back into the caller's unit system for display.

Normalization never rounds and never fails: missing, non-numeric,
non-finite and negative values are read as zero. Rounding only happens
when values are echoed back to the caller.
"""

import math

import polars as pl

from .data import (
    METRIC,
    IMPERIAL,
    CM_TO_IN,
    IN_TO_CM,
    KG_TO_LB,
    LB_TO_KG,
    LENGTH_UNITS,
    WEIGHT_UNITS,
    LENGTH_DECIMALS,
    WEIGHT_DECIMALS,
)
from .models import Dimensions, UnitSystem


# =============================================================================
# POLARS EXPRESSIONS
# =============================================================================

def clean_number(col: str) -> pl.Expr:
    """
    Read a raw input column as a finite float.

    Text is parsed where possible; null, NaN, +/-inf, negative numbers and
    unparseable text become 0.0.
    """
    value = pl.col(col).cast(pl.Float64, strict=False)
    return (
        pl.when(value.is_finite() & (value >= 0))
        .then(value)
        .otherwise(pl.lit(0.0))
    )


def is_metric(unit_col: str = "unit_system") -> pl.Expr:
    """True where the row was entered in metric units. Anything else is imperial."""
    return pl.col(unit_col).cast(pl.Utf8, strict=False).fill_null(IMPERIAL) == METRIC


def length_to_inches(col: str, unit_col: str = "unit_system") -> pl.Expr:
    """Raw length column in inches."""
    value = clean_number(col)
    return pl.when(is_metric(unit_col)).then(value * CM_TO_IN).otherwise(value)


def weight_to_lbs(col: str, unit_col: str = "unit_system") -> pl.Expr:
    """Raw weight column in pounds."""
    value = clean_number(col)
    return pl.when(is_metric(unit_col)).then(value * KG_TO_LB).otherwise(value)


# =============================================================================
# DISPLAY HELPERS
# =============================================================================

def length_unit(unit: UnitSystem) -> str:
    """Display unit for lengths ("cm" or "in")."""
    return LENGTH_UNITS.get(unit, LENGTH_UNITS[IMPERIAL])


def weight_unit(unit: UnitSystem) -> str:
    """Display unit for weights ("kg" or "lb")."""
    return WEIGHT_UNITS.get(unit, WEIGHT_UNITS[IMPERIAL])


def display_length(inches: float, unit: UnitSystem) -> float:
    """Length in inches expressed in the caller's unit system (unrounded)."""
    return inches * IN_TO_CM if unit == METRIC else inches


def display_weight(lbs: float, unit: UnitSystem) -> float:
    """Weight in pounds expressed in the caller's unit system (unrounded)."""
    return lbs * LB_TO_KG if unit == METRIC else lbs


# =============================================================================
# UNIT SYSTEM SWITCH
# =============================================================================

def convert_dimensions(
    dims: Dimensions,
    from_unit: UnitSystem,
    to_unit: UnitSystem,
) -> Dimensions:
    """
    Re-express an entry in another unit system.

    Lengths are rounded to LENGTH_DECIMALS and weight to WEIGHT_DECIMALS, so
    a metric -> imperial -> metric round trip reproduces the entry within
    that precision.

    Args:
        dims: Entry in from_unit
        from_unit: Unit system dims is expressed in
        to_unit: Target unit system

    Returns:
        Dimensions in to_unit (dims unchanged if the systems match)
    """
    if from_unit == to_unit:
        return dims

    length_factor = CM_TO_IN if to_unit == IMPERIAL else IN_TO_CM
    weight_factor = KG_TO_LB if to_unit == IMPERIAL else LB_TO_KG

    return Dimensions(
        length=round(to_number(dims.length) * length_factor, LENGTH_DECIMALS),
        width=round(to_number(dims.width) * length_factor, LENGTH_DECIMALS),
        height=round(to_number(dims.height) * length_factor, LENGTH_DECIMALS),
        weight=round(to_number(dims.weight) * weight_factor, WEIGHT_DECIMALS),
    )


def to_number(value) -> float:
    """Scalar counterpart of clean_number()."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) and number >= 0 else 0.0


__all__ = [
    "clean_number",
    "is_metric",
    "length_to_inches",
    "weight_to_lbs",
    "length_unit",
    "weight_unit",
    "display_length",
    "display_weight",
    "convert_dimensions",
    "to_number",
]
