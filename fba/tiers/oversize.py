"""
Oversize Tier

Everything that is not standard-size. Base fee plus a per-pound charge on
billable weight, no upper bound and no apparel differentiation.
"""

import polars as pl
from shared.tiers import SizeTier

from ..data.reference.fee_schedule import (
    OVERSIZE_BASE_FEE,
    OVERSIZE_PER_LB_FEE,
)


class Oversize(SizeTier):
    """Oversize - catch-all for items exceeding large standard-size."""

    # Identity
    name = "OVERSIZE"
    label = "Oversize"

    # Classification (no thresholds, matches anything left over)
    priority = 3

    @classmethod
    def fee(cls) -> pl.Expr:
        return OVERSIZE_BASE_FEE + pl.col("billable_weight_lbs") * OVERSIZE_PER_LB_FEE
