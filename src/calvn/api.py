from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import RegistryNotInitializedError
from .core.types import DayInfo, EngineSpec, LeapMonthDecision, LunarDate
from .attributes.registry import compute_attributes
from .engines.factory import make_engine as _make_engine

DEFAULT_ENGINE = "vietnam"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RegistryNotInitializedError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str = DEFAULT_ENGINE) -> CalendarEngine:
    return _reg().get(engine)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_lunar_date(d: date, *, engine: str = DEFAULT_ENGINE) -> LunarDate:
    """Gregorian date -> Vietnamese lunar date."""
    return _reg().get(engine).to_lunar_date(d)

def lunar_new_year(year: int, *, engine: str = DEFAULT_ENGINE) -> date:
    """Gregorian date of Tet in Gregorian ``year``."""
    return _reg().get(engine).lunar_new_year(year)

def next_new_year(d: date, *, engine: str = DEFAULT_ENGINE) -> date:
    """First Tet falling on or after ``d``."""
    return _reg().get(engine).next_new_year(d)

def leap_month_info(lunar_year: int, *, engine: str = DEFAULT_ENGINE) -> LeapMonthDecision:
    return _reg().get(engine).leap_month_info(lunar_year)

def month_heading(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> str:
    """Lunar caption for a Gregorian month, e.g. 'Tháng Giêng năm 2024'."""
    return _reg().get(engine).month_heading(year, month)

def lunar_months(lunar_year: int, *, engine: str = DEFAULT_ENGINE) -> List[Dict[str, Any]]:
    return _reg().get(engine).months(lunar_year)

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)
