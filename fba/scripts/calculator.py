"""
FBA Fulfillment Fee Calculator
==============================

Interactive CLI tool to calculate the fulfillment fee of a single item and
list cheaper packaging options.

Usage:
    python -m fba.scripts.calculator
    python -m fba.scripts.calculator --unit imperial
    python -m fba.scripts.calculator --reference
"""

import argparse

from fba.calculate_fees import calculate_fee
from fba.data import METRIC, IMPERIAL, UNIT_SYSTEMS
from fba.models import Dimensions, FeeResult, UnitSystem
from fba.tiers import tier_reference
from fba.units import length_unit, weight_unit
from fba.version import VERSION


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Calculate the FBA fulfillment fee for a single item"
    )
    parser.add_argument(
        "--unit",
        choices=UNIT_SYSTEMS,
        help="Unit system of the entered values (prompted if omitted)",
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Print the size tier reference table and exit",
    )
    return parser.parse_args()


def get_user_input(unit: UnitSystem | None) -> tuple[Dimensions, UnitSystem, bool]:
    """Prompt user for item details. Unparseable numbers are priced as zero."""
    print("\n=== FBA Fulfillment Fee Calculator ===")
    print(f"Version: {VERSION}\n")

    if unit is None:
        print("Unit system:")
        print("  1. Metric (cm, kg)")
        print("  2. Imperial (in, lb)")
        unit_choice = input("Select (1 or 2): ").strip()
        unit = IMPERIAL if unit_choice == "2" else METRIC

    len_unit = length_unit(unit)
    wt_unit = weight_unit(unit)

    # Raw text is passed through, the calculator degrades garbage to zero
    dims = Dimensions(
        length=input(f"\nLength ({len_unit}): ").strip(),
        width=input(f"Width ({len_unit}): ").strip(),
        height=input(f"Height ({len_unit}): ").strip(),
        weight=input(f"Weight ({wt_unit}): ").strip(),
    )

    apparel_input = input("\nApparel or footwear? (y/N): ").strip().lower()
    is_apparel = apparel_input in ("y", "yes")

    return dims, unit, is_apparel


def print_results(result: FeeResult) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    print(f"\nSize tier:          {result.tier_label}")
    print(f"Dimensional weight: {result.dimensional_weight:>8.2f} lb")
    print(f"Billable weight:    {result.shipping_weight:>8.2f} lb")
    print(f"                    {'=' * 9}")
    print(f"FULFILLMENT FEE:    ${result.fulfillment_fee:>8.2f}")

    for note in result.details:
        print(f"\n{note}")

    print("\n--- Cost Saving Options ---")
    if not result.potential_savings:
        print("Already in the best bracket for this tier.")

    for saving in result.potential_savings:
        kind = "Dimensions" if saving.kind == "DIMENSION" else "Weight"
        print(f"\n[{kind}] {saving.target_tier}")
        print(f"  Now:    {saving.current_status}, ${saving.current_fee:.2f}")
        targets = ", ".join(
            f"{r.label} {r.display}{'' if r.is_met else ' (!)'}"
            for r in saving.requirements
        )
        print(f"  Target: {targets}")
        print(f"  Fee:    ${saving.target_fee:.2f}  (save ${saving.saving_amount:.2f})")
    print()


def print_reference() -> None:
    """Print the size tier reference table."""
    print("\n=== FBA Size Tiers ===\n")
    for row in tier_reference().iter_rows(named=True):
        if row["max_weight_lbs"] is None:
            limits = "anything larger"
        else:
            limits = (
                f"{row['max_longest_in']:g} x {row['max_median_in']:g} x {row['max_shortest_in']:g} in, "
                f"{row['max_weight_lbs']:g} lb "
                f"({row['max_longest_cm']:g} x {row['max_median_cm']:g} x {row['max_shortest_cm']:g} cm, "
                f"{row['max_weight_kg']:g} kg)"
            )
        print(f"{row['label']:<16} {limits:<60} from ${row['starting_fee']:.2f}")
    print()


def main():
    """Main entry point."""
    args = parse_args()

    if args.reference:
        print_reference()
        return

    try:
        # Get user input
        dims, unit, is_apparel = get_user_input(args.unit)

        # Run through calculator
        result = calculate_fee(dims, unit, is_apparel)

        # Print results
        print_results(result)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
