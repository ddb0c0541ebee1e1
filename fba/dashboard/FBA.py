"""
FBA Fee Dashboard
=================

Single-page Streamlit app: enter an item, see its size tier, fulfillment
fee, and the packaging changes that would make it cheaper.

Run with:
    streamlit run fba/dashboard/FBA.py
"""

import polars as pl
import streamlit as st

from fba.calculate_fees import calculate_fee
from fba.data import METRIC, IMPERIAL, CM_TO_IN, IN_TO_CM, KG_TO_LB, LB_TO_KG
from fba.models import Dimensions
from fba.tiers import tier_reference
from fba.units import convert_dimensions, length_unit, weight_unit

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="FBA Fulfillment Fee Calculator",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded",
)

DEFAULT_ENTRY = Dimensions(length=20.0, width=15.0, height=5.0, weight=0.5)
FIELDS = [
    ("length", "Length"),
    ("width", "Width"),
    ("height", "Height"),
    ("weight", "Weight"),
]

if "unit" not in st.session_state:
    st.session_state.unit = METRIC
    for field, _ in FIELDS:
        st.session_state[field] = getattr(DEFAULT_ENTRY, field)


def _switch_unit() -> None:
    """Re-express the entered values when the unit system is toggled."""
    new_unit = METRIC if st.session_state.unit_choice == "Metric" else IMPERIAL
    if new_unit == st.session_state.unit:
        return

    entry = Dimensions(*(st.session_state[field] for field, _ in FIELDS))
    converted = convert_dimensions(entry, st.session_state.unit, new_unit)
    for field, _ in FIELDS:
        st.session_state[field] = getattr(converted, field)
    st.session_state.unit = new_unit


# =============================================================================
# SIDEBAR INPUTS
# =============================================================================

with st.sidebar:
    st.header("Item")
    st.radio(
        "Unit system",
        ["Metric", "Imperial"],
        key="unit_choice",
        horizontal=True,
        on_change=_switch_unit,
    )
    unit = st.session_state.unit
    other = IMPERIAL if unit == METRIC else METRIC

    for field, label in FIELDS:
        is_weight = field == "weight"
        shown_unit = weight_unit(unit) if is_weight else length_unit(unit)
        other_unit = weight_unit(other) if is_weight else length_unit(other)

        value = st.number_input(
            f"{label} ({shown_unit})",
            min_value=0.0,
            step=0.1,
            format="%.3f" if is_weight else "%.2f",
            key=field,
        )

        if is_weight:
            factor = KG_TO_LB if unit == METRIC else LB_TO_KG
        else:
            factor = CM_TO_IN if unit == METRIC else IN_TO_CM
        st.caption(f"≈ {value * factor:.2f} {other_unit}")

    is_apparel = st.toggle("Apparel / footwear", value=False)

dims = Dimensions(*(st.session_state[field] for field, _ in FIELDS))
result = calculate_fee(dims, unit, is_apparel)

# =============================================================================
# SUMMARY
# =============================================================================

st.title("FBA Fulfillment Fee Calculator")

col1, col2, col3 = st.columns(3)
col1.metric("Size tier", result.tier_label)
col2.metric("Fulfillment fee", f"${result.fulfillment_fee:.2f}")
col3.metric("Billable weight", f"{result.shipping_weight:.2f} lb")

for note in result.details:
    st.caption(note)

# =============================================================================
# SAVING OPPORTUNITIES
# =============================================================================

st.header("Cost Saving Options")

if result.potential_savings:
    rows = []
    for saving in result.potential_savings:
        rows.append({
            "Option": "Dimensions" if saving.kind == "DIMENSION" else "Weight",
            "Change": saving.target_tier,
            "Current": f"{saving.current_status} - ${saving.current_fee:.2f}",
            "Targets": ", ".join(
                f"{r.label} {r.display}" + ("" if r.is_met else " ✗")
                for r in saving.requirements
            ),
            "Target fee": saving.target_fee,
            "Saving": saving.saving_amount,
        })

    st.dataframe(
        pl.DataFrame(rows),
        hide_index=True,
        use_container_width=True,
        column_config={
            "Target fee": st.column_config.NumberColumn(format="$%.2f"),
            "Saving": st.column_config.NumberColumn(format="$%.2f"),
        },
    )
else:
    st.info("Already in the best bracket for this tier.")

# =============================================================================
# REFERENCE
# =============================================================================

st.header("Size Tier Reference")

reference = tier_reference().select([
    pl.col("label").alias("Tier"),
    pl.col("max_longest_in").alias("Longest (in)"),
    pl.col("max_median_in").alias("Median (in)"),
    pl.col("max_shortest_in").alias("Shortest (in)"),
    pl.col("max_weight_lbs").alias("Weight (lb)"),
    pl.col("max_longest_cm").alias("Longest (cm)"),
    pl.col("max_median_cm").alias("Median (cm)"),
    pl.col("max_shortest_cm").alias("Shortest (cm)"),
    pl.col("max_weight_kg").alias("Weight (kg)"),
    pl.col("starting_fee").alias("From ($)"),
])
st.dataframe(reference, hide_index=True, use_container_width=True)
st.caption("Oversize covers everything beyond large standard-size limits.")
