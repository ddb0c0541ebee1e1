"""FBA reference data: fee schedule, unit conversion, and billable weight configuration."""
