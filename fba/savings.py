"""
Savings Advisor

Suggests reconfigurations that would lower the fee of a calculated item.

    Small standard   nothing to suggest, already the cheapest tier
    Large standard   shrink into small standard-size
                     and/or drop into the next lower weight bracket
    Oversize         shrink into large standard-size

Comparisons use the canonical inch/pound columns; targets are reported in
the unit system the item was entered in. Suggestions that save no more than
SAVINGS_EPSILON are dropped.
"""

from .data import (
    METRIC,
    LARGE_STANDARD_BRACKETS,
    SAVINGS_EPSILON,
    TARGET_LENGTH_DECIMALS,
    TARGET_WEIGHT_DECIMALS,
)
from .fees import tier_fee
from .models import Requirement, SavingOpportunity
from .tiers import ALL, LargeStandard, get_tier
from .units import (
    display_length,
    display_weight,
    length_unit,
    weight_unit,
    to_number,
)


def find_savings(item: dict) -> list[SavingOpportunity]:
    """
    Saving opportunities for one calculated item.

    Args:
        item: Row from calculate_costs() (as a dict)

    Returns:
        Opportunities saving more than SAVINGS_EPSILON, dimension changes
        first
    """
    tier = get_tier(item["size_tier"])
    position = ALL.index(tier)
    if position == 0:
        return []

    candidates = [_downgrade_opportunity(item, ALL[position - 1])]
    if tier is LargeStandard:
        candidates.append(_weight_opportunity(item))

    return [
        c for c in candidates
        if c is not None and c.saving_amount > SAVINGS_EPSILON
    ]


# =============================================================================
# DIMENSION CHANGES
# =============================================================================

def _downgrade_opportunity(item: dict, target) -> SavingOpportunity | None:
    """
    Moving the item into the next stricter tier.

    Priced at the heaviest weight the target tier allows, so the saving holds
    whatever the item ends up weighing.
    """
    if target.fits(item):
        return None

    target_fee = tier_fee(target, target.WEIGHT_LBS, item["is_apparel"])
    current_fee = item["cost_fulfillment"]

    return SavingOpportunity(
        kind="DIMENSION",
        target_tier=f"Downgrade to {target.label.lower()}",
        target_fee=target_fee,
        current_fee=current_fee,
        saving_amount=current_fee - target_fee,
        current_status=_entry_status(item),
        requirements=tuple(_requirements(item, target)),
    )


def _requirements(item: dict, target) -> list[Requirement]:
    """Every threshold of the target tier, in the caller's units."""
    unit = item["unit_system"]
    requirements = []

    for label, col, limit in target.limits():
        if col == "weight_lbs":
            value = _weight_target(limit, unit)
            shown_unit = weight_unit(unit)
        else:
            value = _length_target(limit, unit)
            shown_unit = length_unit(unit)

        requirements.append(Requirement(
            label=label,
            target=value,
            unit=shown_unit,
            is_met=item[col] <= limit,
        ))

    return requirements


def _length_target(inches: float, unit: str) -> float:
    """Threshold in the caller's units; converted values are rounded for display."""
    if unit == METRIC:
        return round(display_length(inches, unit), TARGET_LENGTH_DECIMALS)
    return inches


def _weight_target(lbs: float, unit: str) -> float:
    if unit == METRIC:
        return round(display_weight(lbs, unit), TARGET_WEIGHT_DECIMALS)
    return lbs


def _entry_status(item: dict) -> str:
    """Current tier and the item as entered, e.g. "Large standard (20*15*5cm, 0.5kg)"."""
    unit = item["unit_system"]
    sides = "*".join(
        f"{to_number(item[col]):.10g}" for col in ("length", "width", "height")
    )
    weight = f"{to_number(item['weight']):.10g}"
    return f"{item['tier_label']} ({sides}{length_unit(unit)}, {weight}{weight_unit(unit)})"


# =============================================================================
# WEIGHT CHANGES
# =============================================================================

def _weight_opportunity(item: dict) -> SavingOpportunity | None:
    """
    Dropping billable weight into the next lower large standard bracket.

    None if the item is already in the lowest bracket.
    """
    billable = item["billable_weight_lbs"]

    lower_bracket = None
    for upper, _ in reversed(LARGE_STANDARD_BRACKETS):
        if upper < billable:
            lower_bracket = upper
            break

    if lower_bracket is None:
        return None

    unit = item["unit_system"]
    target_fee = tier_fee(LargeStandard, lower_bracket, item["is_apparel"])
    current_fee = item["cost_fulfillment"]

    return SavingOpportunity(
        kind="WEIGHT",
        target_tier="Optimize weight within current tier",
        target_fee=target_fee,
        current_fee=current_fee,
        saving_amount=current_fee - target_fee,
        current_status=f"Billable weight {billable:.2f} lb",
        requirements=(
            Requirement(
                label="Billable weight",
                target=_weight_target(lower_bracket, unit),
                unit=weight_unit(unit),
                is_met=False,
                operator="<",
            ),
        ),
    )


__all__ = [
    "find_savings",
]
