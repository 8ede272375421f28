"""Process exit codes, one per outcome tier."""

SUCCESS: int = 0
"""Result printed, or help requested."""

USAGE_ERROR: int = 1
"""Malformed, missing or extraneous argument, or unknown operation."""

MATH_ERROR: int = 2
"""Division by zero, overflow or domain violation."""
