"""
calvn.engines.leap
------------------
Leap-month placement by a fixed 8-of-19 Metonic pattern.

This is a heuristic. Real Vietnamese placement follows the principal solar
terms, which are not modelled; the rule disagrees with published calendars
for many years and is kept as-is for the years the known-date table does not
cover.
"""

from __future__ import annotations

from ..core.types import LeapMonthDecision
from .params import LeapParams


class LeapMonthPolicy:
    def __init__(self, params: LeapParams):
        self.p = params

    def cycle_position(self, lunar_year: int) -> int:
        """Position of the year in the cycle, 0..cycle_years-1."""
        return (lunar_year - self.p.reference_year) % self.p.cycle_years

    def has_leap(self, lunar_year: int) -> bool:
        return self.cycle_position(lunar_year) in self.p.leap_residues

    def leap_month_info(self, lunar_year: int) -> LeapMonthDecision:
        if not self.has_leap(lunar_year):
            return LeapMonthDecision(has_leap=False)
        leap_month = ((lunar_year % 12) + (lunar_year % 3)) % 12 + 1
        return LeapMonthDecision(has_leap=True, leap_month=leap_month)
