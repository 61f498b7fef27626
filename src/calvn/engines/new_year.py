"""
calvn.engines.new_year
----------------------
Gregorian date of Tet (Vietnamese Lunar New Year) for a Gregorian year.

Resolution order:
  1. the known-date table (exact);
  2. otherwise a new moon extrapolated from the reference Tet, shifted by whole
     synodic months into the [Jan 15, Feb 18] window of the requested year.

The fallback never fails. Far from the reference era it drifts by a day or
more, and the window rule can pick the neighbouring lunation; both are
accepted limitations of the approximation.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Tuple

from ..core.time import from_jdn, to_jdn
from ..core.types import Mode
from ..reference.new_years import NewYearTable
from .interfaces import NewMoonProtocol
from .params import AstroParams

log = logging.getLogger(__name__)


class LunarNewYearResolver:
    def __init__(self, params: AstroParams, table: NewYearTable, new_moon: NewMoonProtocol):
        self.p = params
        self.table = table
        self.new_moon = new_moon

    def lunar_new_year(self, year: int) -> date:
        return self.resolve(year)[0]

    def resolve(self, year: int) -> Tuple[date, Mode]:
        known = self.table.get(year)
        if known is not None:
            return known, "exact"

        log.debug("year %d not in table %s; using astronomical estimate", year, self.table.version)
        jdn, mode = self.estimate_jdn(year)
        d = from_jdn(jdn)

        # The window lies inside ``year``, so this only guards odd windows.
        if d.year != year:
            log.debug("re-anchoring %s to year %d", d.isoformat(), year)
            d = date(year, d.month, d.day)
            mode = "corrected"
        return d, mode

    def approx_jd(self, year: int) -> float:
        """Extrapolated Julian day of the new-year new moon, before correction."""
        return self.p.reference_jdn + (year - self.p.reference_year) * self.p.year_excess

    def estimate_jdn(self, year: int) -> Tuple[int, Mode]:
        jd = float(self.new_moon.nearest_new_moon(self.approx_jd(year)))

        lo = to_jdn(date(year, *self.p.window_start))
        hi = to_jdn(date(year, *self.p.window_end))
        S = self.p.synodic_month

        if jd < lo:
            n = math.ceil((lo - jd) / S)
            log.debug("estimate JD %.1f before window; +%d lunations", jd, n)
            return math.floor(jd + n * S + 0.5), "corrected"
        if jd > hi:
            n = math.ceil((jd - hi) / S)
            log.debug("estimate JD %.1f after window; -%d lunations", jd, n)
            return math.floor(jd - n * S + 0.5), "corrected"
        return int(jd), "approximate"
