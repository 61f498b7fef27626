"""Diagnostics package.

- new_years_table, leap_months: plain-text tables, no extra dependencies
- new_year_scatter: requires the diagnostics extra (numpy, matplotlib)
"""

__all__ = ["new_years_table", "leap_months", "new_year_scatter"]
