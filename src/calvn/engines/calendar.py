"""
calvn.engines.calendar
----------------------
The orchestrator. Maps a Gregorian date to a Vietnamese lunar date by
anchoring on the Tet that starts its lunar year and walking forward one
lunation at a time.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..core.time import from_jdn, to_jdn
from ..core.types import DayInfo, EngineId, LeapMonthDecision, LunarDate
from ..reference.names import month_name
from .interfaces import LeapPolicyProtocol, NewMoonProtocol, NewYearProtocol
from .params import AstroParams

log = logging.getLogger(__name__)

MAX_MONTH = 12
MAX_DAY = 30


class _Walk(NamedTuple):
    remaining: int     # 1-based day count still to place, starting at the current month
    month: int
    is_leap: bool
    leap_done: bool


class LunarDateMapper:
    """
    Gregorian date -> LunarDate.

    Inputs are trusted: an impossible date (e.g. Feb 30 on a duck-typed value)
    is converted arithmetically and yields an unspecified but in-range result.

    When the walk runs out of months before the next Tet, the leftover days
    stay in the last walked month and the day is clamped to 30.
    """
    def __init__(
        self,
        id: EngineId,
        params: AstroParams,
        new_moon: NewMoonProtocol,
        new_year: NewYearProtocol,
        leap: LeapPolicyProtocol,
    ):
        self.id = id
        self.p = params
        self.new_moon = new_moon
        self.new_year = new_year
        self.leap = leap

    # ---------------------------------------------------------
    # Component pass-throughs
    # ---------------------------------------------------------

    def lunar_new_year(self, year: int) -> date:
        return self.new_year.lunar_new_year(year)

    def leap_month_info(self, lunar_year: int) -> LeapMonthDecision:
        return self.leap.leap_month_info(lunar_year)

    # ---------------------------------------------------------
    # Month walk
    # ---------------------------------------------------------

    def month_length(self, ref_jdn: int, month: int) -> int:
        """Days in the ``month``-th lunation after the new year at ``ref_jdn``."""
        jd = ref_jdn + (month - 1) * self.p.synodic_month
        # both ends from one lunation index
        start, end = self.new_moon.lunation_bounds(jd)
        return end - start

    @staticmethod
    def _advance(w: _Walk, dim: int, leap: LeapMonthDecision) -> Optional[_Walk]:
        """Step past a month of ``dim`` days; None when no month follows."""
        month = w.month + 1
        if leap.has_leap and not w.leap_done and month == leap.leap_month + 1:
            return _Walk(w.remaining - dim, leap.leap_month, True, True)
        if month > MAX_MONTH:
            return None
        return _Walk(w.remaining - dim, month, False, w.leap_done)

    def walk(self, ref_jdn: int, day_no: int, leap: LeapMonthDecision) -> Tuple[_Walk, List[int], bool]:
        """
        Locate lunar day ``day_no`` (1 = new-year day) of the year starting at
        ``ref_jdn``. Returns the final state, the month lengths seen, and
        whether the walk ran out of months.
        """
        w = _Walk(day_no, 1, False, False)
        lengths: List[int] = []
        while True:
            dim = self.month_length(ref_jdn, w.month)
            lengths.append(dim)
            if w.remaining <= dim:
                return w, lengths, False
            nxt = self._advance(w, dim, leap)
            if nxt is None:
                return w, lengths, True
            if nxt.is_leap:
                log.debug("entering leap month %d", nxt.month)
            w = nxt

    def months(self, lunar_year: int) -> List[Dict[str, Any]]:
        """
        Month records of a lunar year as the walk sees them:
        month, is_leap_month, first Gregorian day and length in days.
        Months starting on or after the next Tet are not part of the year,
        so a leap month can be missing even when the policy asks for one.
        """
        ref_jdn = to_jdn(self.new_year.lunar_new_year(lunar_year))
        end_jdn = to_jdn(self.new_year.lunar_new_year(lunar_year + 1))
        leap = self.leap.leap_month_info(lunar_year)
        out = []
        w: Optional[_Walk] = _Walk(0, 1, False, False)
        start = ref_jdn
        while w is not None and start < end_jdn:
            dim = self.month_length(ref_jdn, w.month)
            out.append({
                "month": w.month,
                "is_leap_month": w.is_leap,
                "first_date": from_jdn(start),
                "days": dim,
            })
            start += dim
            w = self._advance(w, dim, leap)
        return out

    # ---------------------------------------------------------
    # Gregorian -> lunar
    # ---------------------------------------------------------

    def _locate(self, d: date) -> Tuple[LunarDate, Dict[str, Any]]:
        cur, cur_mode = self.new_year.resolve(d.year)
        jdn = to_jdn(d)
        if jdn >= to_jdn(cur):
            lunar_year, ref, mode = d.year, cur, cur_mode
        else:
            ref, mode = self.new_year.resolve(d.year - 1)
            lunar_year = d.year - 1

        ref_jdn = to_jdn(ref)
        day_no = jdn - ref_jdn + 1
        leap = self.leap.leap_month_info(lunar_year)
        w, lengths, overflow = self.walk(ref_jdn, day_no, leap)

        day = max(1, min(MAX_DAY, w.remaining))
        clamped = overflow or day != w.remaining
        if clamped:
            log.debug("clamped %s: month %d day %d -> %d", d.isoformat(), w.month, w.remaining, day)

        out = LunarDate(
            year=lunar_year,
            month=w.month,
            day=day,
            is_leap_month=w.is_leap,
            month_name=month_name(w.month, w.is_leap),
        )
        debug = {
            "new_year": ref,
            "mode": mode,
            "days_since_new_year": day_no - 1,
            "leap": leap,
            "month_lengths": tuple(lengths),
            "unclamped_day": w.remaining,
            "clamped": clamped,
        }
        return out, debug

    def to_lunar_date(self, d: date) -> LunarDate:
        return self._locate(d)[0]

    def next_new_year(self, d: date) -> date:
        """First Tet on or after ``d``."""
        ny = self.new_year.lunar_new_year(d.year)
        if ny < d:
            ny = self.new_year.lunar_new_year(d.year + 1)
        return ny

    def month_heading(self, year: int, month: int) -> str:
        """Lunar label for a Gregorian month, taken at its 15th day."""
        return self.to_lunar_date(date(year, month, 15)).label()

    # ---------------------------------------------------------
    # High-level API
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        table = self.new_year.table
        return {
            "id": self.id.__dict__,
            "table_version": table.version,
            "table_years": (table.years()[0], table.years()[-1]) if table else None,
            "reference_year": self.p.reference_year,
        }

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        lunar, dbg = self._locate(d)
        return DayInfo(
            civil_date=d,
            engine=self.id,
            lunar=lunar,
            debug=dbg if debug else None,
        )

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
