"""
Fee Calculator Records

Immutable inputs and outputs of the single-item fee calculation.
"""

from typing import Literal, NamedTuple


UnitSystem = Literal["metric", "imperial"]
OpportunityKind = Literal["DIMENSION", "WEIGHT"]


class Dimensions(NamedTuple):
    """One item as entered: three sides and the actual weight.

    Values are read in the caller's unit system (cm/kg or in/lb) and may come
    straight from text inputs; anything non-numeric is priced as zero.
    """
    length: float
    width: float
    height: float
    weight: float


class Requirement(NamedTuple):
    """One threshold an item has to meet for a suggested reconfiguration."""
    label: str
    target: float       # In the caller's unit system
    unit: str
    is_met: bool
    operator: str = "<="

    @property
    def display(self) -> str:
        return f"{self.operator} {self.target:g}{self.unit}"


class SavingOpportunity(NamedTuple):
    """A reconfiguration that would lower the fulfillment fee."""
    kind: OpportunityKind
    target_tier: str
    target_fee: float
    current_fee: float
    saving_amount: float
    current_status: str
    requirements: tuple[Requirement, ...]


class FeeResult(NamedTuple):
    """Fee calculation for one item, with cheaper alternatives."""
    size_tier: str
    tier_label: str
    fulfillment_fee: float
    dimensional_weight: float
    shipping_weight: float
    details: tuple[str, ...]
    potential_savings: tuple[SavingOpportunity, ...]
    calculator_version: str
