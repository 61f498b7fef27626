"""
calvn.engines.factory
---------------------
Transforms pure data specifications into live, executable engine objects.
"""

from __future__ import annotations
from calvn.core.types import EngineSpec
from calvn.engines.calendar import LunarDateMapper
from calvn.engines.leap import LeapMonthPolicy
from calvn.engines.new_moon import NewMoonApproximator
from calvn.engines.new_year import LunarNewYearResolver


def make_engine(spec: EngineSpec) -> LunarDateMapper:
    """The universal entry point."""
    # 1. Astronomy
    new_moon = NewMoonApproximator(spec.astro)
    new_year = LunarNewYearResolver(spec.astro, spec.table, new_moon)

    # 2. Calendar rules
    leap = LeapMonthPolicy(spec.leap)

    # 3. Orchestrate
    return LunarDateMapper(
        id=spec.id,
        params=spec.astro,
        new_moon=new_moon,
        new_year=new_year,
        leap=leap,
    )
