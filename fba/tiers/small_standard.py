"""
Small Standard-Size Tier

Flat and thin items up to 1 lb. Cheapest tier; always bills actual weight.
"""

import polars as pl
from shared.tiers import SizeTier

from ..data.reference.fee_schedule import (
    SMALL_STANDARD_FEE,
    SMALL_STANDARD_APPAREL_FEE,
)


class SmallStandard(SizeTier):
    """Small standard-size - 15 x 12 x 0.75 in, 1 lb."""

    # Identity
    name = "SMALL_STANDARD"
    label = "Small standard"

    # Classification (checked first)
    priority = 1

    # Billing (dimensional weight is never charged at this tier)
    uses_dim_weight = False

    # Thresholds
    LONGEST_IN = 15
    MEDIAN_IN = 12
    SHORTEST_IN = 0.75
    WEIGHT_LBS = 1

    @classmethod
    def fee(cls) -> pl.Expr:
        return (
            pl.when(pl.col("is_apparel"))
            .then(pl.lit(SMALL_STANDARD_APPAREL_FEE))
            .otherwise(pl.lit(SMALL_STANDARD_FEE))
        )
