"""
Fulfillment Fee Calculation

Fee of an item given its size tier, billable weight, and apparel flag.

Each tier defines its own fee expression (see fba.tiers); fee_expr() picks
the one for the tier an item was classified into. The scalar helpers
evaluate the very same expression on a one-row frame, so hypothetical
weights and tiers are always priced exactly like calculated items.
"""

import polars as pl

from shared.tiers import SizeTier
from .tiers import ALL, SmallStandard, LargeStandard, Oversize


def fee_expr() -> pl.Expr:
    """
    Polars expression for the fulfillment fee.

    Reads the tier flag columns, billable_weight_lbs and is_apparel. Flags
    are checked in tier priority order, so the strictest flagged tier wins;
    an item with no flag set is priced in the catch-all tier.
    """
    *flagged, catch_all = ALL

    first, *rest = flagged
    expr = pl.when(pl.col(first.flag_col())).then(first.fee())
    for tier in rest:
        expr = expr.when(pl.col(tier.flag_col())).then(tier.fee())

    return expr.otherwise(catch_all.fee())


def tier_fee(tier: type[SizeTier], weight_lbs: float, is_apparel: bool = False) -> float:
    """
    Fee for a hypothetical item billed in a given tier.

    Args:
        tier: Size tier class to price in
        weight_lbs: Billable weight in pounds
        is_apparel: True for apparel and footwear

    Returns:
        Fee in dollars
    """
    item = pl.DataFrame({
        "billable_weight_lbs": [float(weight_lbs)],
        "is_apparel": [bool(is_apparel)],
        **{t.flag_col(): [t is tier] for t in ALL},
    })
    return item.select(fee_expr()).item()


def fulfillment_fee(
    weight_lbs: float,
    is_small_standard: bool,
    is_large_standard: bool,
    is_apparel: bool = False,
) -> float:
    """
    Fee for a billable weight and a pair of tier flags.

    Small standard-size wins when both flags are set; with neither set the
    item is priced as oversize.
    """
    if is_small_standard:
        tier = SmallStandard
    elif is_large_standard:
        tier = LargeStandard
    else:
        tier = Oversize
    return tier_fee(tier, weight_lbs, is_apparel)


__all__ = [
    "fee_expr",
    "tier_fee",
    "fulfillment_fee",
]
