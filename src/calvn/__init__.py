"""calvn public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401
from .attributes import standard as _standard_attributes  # noqa: F401

from .api import (
    to_lunar_date,
    lunar_new_year,
    next_new_year,
    leap_month_info,
    month_heading,
    lunar_months,
    day_info,
    explain,
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
)
from .core.types import DayInfo, EngineId, EngineSpec, LeapMonthDecision, LunarDate

__all__ = [
    "to_lunar_date",
    "lunar_new_year",
    "next_new_year",
    "leap_month_info",
    "month_heading",
    "lunar_months",
    "day_info",
    "explain",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "DayInfo",
    "EngineId",
    "EngineSpec",
    "LeapMonthDecision",
    "LunarDate",
]
