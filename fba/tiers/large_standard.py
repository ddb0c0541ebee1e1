"""
Large Standard-Size Tier

Items up to 18 x 14 x 8 in and 20 lb that are not small standard-size.

Fee is stepped by billable weight:
    <= 0.5 lb   $3.86
    <= 1 lb     $4.08
    <= 1.5 lb   $4.54
    <= 2 lb     $5.05
    <= 3 lb     $5.60
    > 3 lb      $6.50 + $0.08 per started half pound above 3 lb
                (+ $1.00 for apparel)
"""

import polars as pl
from shared.tiers import SizeTier

from ..data.reference.fee_schedule import (
    LARGE_STANDARD_BRACKETS,
    LARGE_STANDARD_BASE_WEIGHT,
    LARGE_STANDARD_BASE_FEE,
    LARGE_STANDARD_STEP_LBS,
    LARGE_STANDARD_STEP_FEE,
    LARGE_STANDARD_APPAREL_SURCHARGE,
    LARGE_STANDARD_MAX_WEIGHT,
)


class LargeStandard(SizeTier):
    """Large standard-size - 18 x 14 x 8 in, 20 lb."""

    # Identity
    name = "LARGE_STANDARD"
    label = "Large standard"

    # Classification
    priority = 2

    # Thresholds
    LONGEST_IN = 18
    MEDIAN_IN = 14
    SHORTEST_IN = 8
    WEIGHT_LBS = LARGE_STANDARD_MAX_WEIGHT

    @classmethod
    def fee(cls) -> pl.Expr:
        weight = pl.col("billable_weight_lbs")

        # Half-pound steps above the base weight, a started step counts in full
        steps = (
            (pl.max_horizontal(weight, pl.lit(LARGE_STANDARD_BASE_WEIGHT)) - LARGE_STANDARD_BASE_WEIGHT)
            / LARGE_STANDARD_STEP_LBS
        ).ceil()

        stepped_fee = (
            LARGE_STANDARD_BASE_FEE
            + steps * LARGE_STANDARD_STEP_FEE
            + pl.when(pl.col("is_apparel"))
            .then(pl.lit(LARGE_STANDARD_APPAREL_SURCHARGE))
            .otherwise(pl.lit(0.0))
        )

        # Brackets are ascending, first upper bound that holds wins
        (first_upper, first_fee), *rest = LARGE_STANDARD_BRACKETS
        expr = pl.when(weight <= first_upper).then(pl.lit(first_fee))
        for upper, bracket_fee in rest:
            expr = expr.when(weight <= upper).then(pl.lit(bracket_fee))

        return expr.otherwise(stepped_fee)
