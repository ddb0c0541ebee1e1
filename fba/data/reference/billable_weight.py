"""
Billable Weight Configuration

FBA dimensional weight rules. Small standard-size items always bill actual
weight; every other tier bills the greater of actual and dimensional weight
(see uses_dim_weight on the tier classes).
"""

DIM_FACTOR = 139              # Cubic inches per pound

# Sorted sides multiplied together and divided by DIM_FACTOR
FACTOR_FIELDS = ["longest_side_in", "median_side_in", "shortest_side_in"]
