from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Optional

@dataclass(frozen=True)
class EngineId:
    family: Literal["table", "astro", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int          # 1..12, a leap month reuses the index of the month it doubles
    day: int            # 1..30
    is_leap_month: bool
    month_name: str

    def label(self) -> str:
        return f"{self.month_name} năm {self.year}"

@dataclass(frozen=True)
class LeapMonthDecision:
    has_leap: bool
    leap_month: int = 0  # 1..12 when has_leap, else 0

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class EngineSpec:
    """Pure data payload for constructing a lunar calendar engine."""
    id: EngineId
    astro: Any   # AstroParams
    leap: Any    # LeapParams
    table: Any   # NewYearTable
    meta: Dict[str, Any]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, **kwargs)

Mode = Literal["exact", "corrected", "approximate"]
