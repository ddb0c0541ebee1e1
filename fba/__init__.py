"""
FBA Fee Module

Fulfillment fee calculator for Amazon FBA size tiers, with suggestions for
cheaper packaging.
"""

from .calculate_fees import calculate_fee, calculate_costs
from .fees import fulfillment_fee
from .models import Dimensions, FeeResult, Requirement, SavingOpportunity
from .version import VERSION

__all__ = [
    "calculate_fee",
    "calculate_costs",
    "fulfillment_fee",
    "Dimensions",
    "FeeResult",
    "Requirement",
    "SavingOpportunity",
    "VERSION",
]
