"""
Size Tier Base Class

Shared base class for all fulfillment size tiers.
"""

from abc import ABC, abstractmethod
import polars as pl


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def sorted_sides(
    length_col: str = "length_in",
    width_col: str = "width_in",
    height_col: str = "height_in",
) -> pl.Expr:
    """
    List expression holding the three sides sorted longest first.

    Thresholds are asymmetric per axis, so tiers compare against the sorted
    sides, never against length/width/height as entered.

    Args:
        length_col: Column name containing the length
        width_col: Column name containing the width
        height_col: Column name containing the height

    Returns:
        Polars list expression [longest, median, shortest]
    """
    return (
        pl.concat_list([length_col, width_col, height_col])
        .list.sort(descending=True)
    )


# =============================================================================
# BASE CLASS
# =============================================================================

class SizeTier(ABC):
    """
    Base class for all size tiers.

    Attributes:
        IDENTITY
            name            - Short code (e.g., "SMALL_STANDARD")
            label           - Human-readable name

        CLASSIFICATION
            priority        - Evaluation rank (1 = strictest, checked first)
            LONGEST_IN      - Max longest side, inclusive (None = unbounded)
            MEDIAN_IN       - Max median side, inclusive (None = unbounded)
            SHORTEST_IN     - Max shortest side, inclusive (None = unbounded)
            WEIGHT_LBS      - Max actual weight, inclusive (None = unbounded)

        BILLING
            uses_dim_weight - True if billable weight is max(actual, dim)
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    label: str

    # -------------------------------------------------------------------------
    # CLASSIFICATION
    # -------------------------------------------------------------------------
    priority: int
    LONGEST_IN: float | None = None
    MEDIAN_IN: float | None = None
    SHORTEST_IN: float | None = None
    WEIGHT_LBS: float | None = None

    # -------------------------------------------------------------------------
    # BILLING
    # -------------------------------------------------------------------------
    uses_dim_weight: bool = True

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def flag_col(cls) -> str:
        """Name of the boolean column marking items in this tier."""
        return f"tier_{cls.name.lower()}"

    @classmethod
    def limits(cls) -> list[tuple[str, str, float]]:
        """
        (label, column, threshold) for every bounded attribute.

        Order is longest, median, shortest, weight.
        """
        bounds = [
            ("Longest side", "longest_side_in", cls.LONGEST_IN),
            ("Median side", "median_side_in", cls.MEDIAN_IN),
            ("Shortest side", "shortest_side_in", cls.SHORTEST_IN),
            ("Weight", "weight_lbs", cls.WEIGHT_LBS),
        ]
        return [(label, col, limit) for label, col, limit in bounds if limit is not None]

    @classmethod
    def is_catch_all(cls) -> bool:
        """True if the tier has no thresholds at all."""
        return not cls.limits()

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when an item fits this tier.

        All thresholds are inclusive. A tier without thresholds matches
        everything.
        """
        condition = pl.lit(True)
        for _, col, limit in cls.limits():
            condition = condition & (pl.col(col) <= limit)
        return condition

    @classmethod
    def fits(cls, item: dict) -> bool:
        """Scalar form of conditions() for one calculated row."""
        return all(item[col] <= limit for _, col, limit in cls.limits())

    @classmethod
    @abstractmethod
    def fee(cls) -> pl.Expr:
        """
        Polars expression for the fee of an item billed in this tier.

        Reads billable_weight_lbs and is_apparel.
        """
        ...
