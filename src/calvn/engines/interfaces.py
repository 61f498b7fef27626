"""
calvn.engines.interfaces
------------------------
Boundaries between the components of the lunar engine.

All day counts are Julian Day Numbers (integers, noon-based civil days) unless
a parameter is named ``jd``, in which case fractional days are accepted.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, Tuple, Union

from ..core.types import LeapMonthDecision, Mode
from ..reference.new_years import NewYearTable

NumT = Union[int, float]


class NewMoonProtocol(Protocol):
    """Estimates new moons from a truncated mean-lunation series."""

    def nearest_new_moon(self, jd: NumT) -> int:
        """JDN of the new moon attached to the lunation containing ``jd``."""
        ...

    def lunation_bounds(self, jd: NumT) -> Tuple[int, int]:
        """(this new moon, next new moon) for the lunation containing ``jd``."""
        ...


class NewYearProtocol(Protocol):
    """Resolves the Gregorian date of Tet for a Gregorian year."""

    table: NewYearTable

    def lunar_new_year(self, year: int) -> date:
        ...

    def resolve(self, year: int) -> Tuple[date, Mode]:
        """Same as lunar_new_year, also reporting how the date was obtained."""
        ...


class LeapPolicyProtocol(Protocol):
    """Decides which month, if any, is doubled in a lunar year."""

    def leap_month_info(self, lunar_year: int) -> LeapMonthDecision:
        ...
