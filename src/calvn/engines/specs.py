from __future__ import annotations

from typing import Dict

from ..core.types import EngineId, EngineSpec
from ..reference.new_years import EMPTY_TABLE, VN_TET_TABLE
from .params import AstroParams, LeapParams


DEFAULT_ASTRO = AstroParams()
DEFAULT_LEAP = LeapParams()

# Bundled known-date table with the astronomical fallback outside it.
VIETNAM = EngineSpec(
    id=EngineId(family="table", name="vietnam", version=VN_TET_TABLE.version),
    astro=DEFAULT_ASTRO,
    leap=DEFAULT_LEAP,
    table=VN_TET_TABLE,
    meta={"description": "Known Tet dates 2020-2035, astronomical estimate elsewhere"},
)

# Same constants, no table: every year takes the fallback path.
VIETNAM_ASTRO = EngineSpec(
    id=EngineId(family="astro", name="vietnam-astro", version="1"),
    astro=DEFAULT_ASTRO,
    leap=DEFAULT_LEAP,
    table=EMPTY_TABLE,
    meta={"description": "Astronomical estimate for every year"},
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "vietnam": VIETNAM,
    "vietnam-astro": VIETNAM_ASTRO,
}
