"""Domain models and stat formulas."""
