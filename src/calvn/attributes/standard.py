from __future__ import annotations
from typing import Any, Dict

from ..reference.names import can_chi_year
from .registry import register_attribute, jdn

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": int(jdn(info) % 7)}

def can_chi(info) -> Dict[str, Any]:
    return {"can_chi": can_chi_year(info.lunar.year)}

register_attribute("weekday", weekday)
register_attribute("can_chi", can_chi)
