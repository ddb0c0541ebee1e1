"""
FBA Fulfillment Fee Schedule

Per-unit fulfillment fees by size tier, in USD.

Small standard:  flat fee, higher for apparel and footwear
Large standard:  stepped by billable weight up to 3 lb, then a base fee plus
                 a charge per started half pound above 3 lb
Oversize:        base fee plus a charge per pound of billable weight
"""

# =============================================================================
# SMALL STANDARD
# =============================================================================

SMALL_STANDARD_FEE = 3.22
SMALL_STANDARD_APPAREL_FEE = 3.45


# =============================================================================
# LARGE STANDARD
# =============================================================================

# (billable_weight_upper_lbs, fee) - upper bound inclusive, ascending
LARGE_STANDARD_BRACKETS = [
    (0.5, 3.86),
    (1.0, 4.08),
    (1.5, 4.54),
    (2.0, 5.05),
    (3.0, 5.60),
]

LARGE_STANDARD_BASE_WEIGHT = 3.0      # Stepping starts above this weight
LARGE_STANDARD_BASE_FEE = 6.50
LARGE_STANDARD_STEP_LBS = 0.5
LARGE_STANDARD_STEP_FEE = 0.08
LARGE_STANDARD_APPAREL_SURCHARGE = 1.00  # Only above LARGE_STANDARD_BASE_WEIGHT

# Heaviest large standard-size item (also the tier's weight threshold)
LARGE_STANDARD_MAX_WEIGHT = 20


# =============================================================================
# OVERSIZE
# =============================================================================

OVERSIZE_BASE_FEE = 15.00
OVERSIZE_PER_LB_FEE = 0.50


# =============================================================================
# SAVINGS
# =============================================================================

# Savings at or below this amount are not worth suggesting
SAVINGS_EPSILON = 0.01
