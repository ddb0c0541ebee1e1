"""
Unit Conversion Configuration

All comparisons happen in inches and pounds. Callers may enter metric
(centimetres, kilograms) or imperial values; the unit system also decides
the units used when values are echoed back for display.
"""

METRIC = "metric"
IMPERIAL = "imperial"
UNIT_SYSTEMS = (METRIC, IMPERIAL)

CM_TO_IN = 0.393701
IN_TO_CM = 1 / CM_TO_IN
KG_TO_LB = 2.20462
LB_TO_KG = 1 / KG_TO_LB

LENGTH_UNITS = {METRIC: "cm", IMPERIAL: "in"}
WEIGHT_UNITS = {METRIC: "kg", IMPERIAL: "lb"}

# Rounding when switching a whole entry between unit systems
LENGTH_DECIMALS = 2
WEIGHT_DECIMALS = 3

# Rounding of converted tier thresholds shown as requirement targets
TARGET_LENGTH_DECIMALS = 1
TARGET_WEIGHT_DECIMALS = 2
