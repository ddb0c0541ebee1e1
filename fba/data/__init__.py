"""
FBA Data

Reference data and configuration for fee calculation.

Structure:
    - reference/: Static reference data (fee schedule, units, billable weight)
"""

from .reference.billable_weight import (
    DIM_FACTOR,
    FACTOR_FIELDS,
)
from .reference.units import (
    METRIC,
    IMPERIAL,
    UNIT_SYSTEMS,
    CM_TO_IN,
    IN_TO_CM,
    KG_TO_LB,
    LB_TO_KG,
    LENGTH_UNITS,
    WEIGHT_UNITS,
    LENGTH_DECIMALS,
    WEIGHT_DECIMALS,
    TARGET_LENGTH_DECIMALS,
    TARGET_WEIGHT_DECIMALS,
)
from .reference.fee_schedule import (
    SMALL_STANDARD_FEE,
    SMALL_STANDARD_APPAREL_FEE,
    LARGE_STANDARD_BRACKETS,
    LARGE_STANDARD_BASE_WEIGHT,
    LARGE_STANDARD_BASE_FEE,
    LARGE_STANDARD_STEP_LBS,
    LARGE_STANDARD_STEP_FEE,
    LARGE_STANDARD_APPAREL_SURCHARGE,
    LARGE_STANDARD_MAX_WEIGHT,
    OVERSIZE_BASE_FEE,
    OVERSIZE_PER_LB_FEE,
    SAVINGS_EPSILON,
)


__all__ = [
    # Billable weight config
    "DIM_FACTOR",
    "FACTOR_FIELDS",
    # Units
    "METRIC",
    "IMPERIAL",
    "UNIT_SYSTEMS",
    "CM_TO_IN",
    "IN_TO_CM",
    "KG_TO_LB",
    "LB_TO_KG",
    "LENGTH_UNITS",
    "WEIGHT_UNITS",
    "LENGTH_DECIMALS",
    "WEIGHT_DECIMALS",
    "TARGET_LENGTH_DECIMALS",
    "TARGET_WEIGHT_DECIMALS",
    # Fee schedule
    "SMALL_STANDARD_FEE",
    "SMALL_STANDARD_APPAREL_FEE",
    "LARGE_STANDARD_BRACKETS",
    "LARGE_STANDARD_BASE_WEIGHT",
    "LARGE_STANDARD_BASE_FEE",
    "LARGE_STANDARD_STEP_LBS",
    "LARGE_STANDARD_STEP_FEE",
    "LARGE_STANDARD_APPAREL_SURCHARGE",
    "LARGE_STANDARD_MAX_WEIGHT",
    "OVERSIZE_BASE_FEE",
    "OVERSIZE_PER_LB_FEE",
    "SAVINGS_EPSILON",
]
