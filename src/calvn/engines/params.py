"""
calvn.engines.params
--------------------
Immutable numeric constants shared by the engine components.

The defaults reproduce the reference era of the Vietnamese calendar page the
engine was built for: Tet 2000 (2000-02-05, JDN 2451580) as the anchor and
the Meeus mean new moon of k=0 (JD 2451550.09766) as the lunation epoch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Mean synodic month and tropical year (days)
SYNODIC_MONTH = 29.530588853
TROPICAL_YEAR = 365.24219878

# Tet 2000 = 2000-02-05
REFERENCE_YEAR = 2000
REFERENCE_JDN = 2451580

# Meeus: JDE of the k=0 mean new moon, and lunations per Julian century
NEW_MOON_EPOCH_JD = 2451550.09766
LUNATIONS_PER_CENTURY = 1236.85


@dataclass(frozen=True)
class AstroParams:
    synodic_month: float = SYNODIC_MONTH
    tropical_year: float = TROPICAL_YEAR

    reference_year: int = REFERENCE_YEAR
    reference_jdn: int = REFERENCE_JDN

    new_moon_epoch_jd: float = NEW_MOON_EPOCH_JD
    lunations_per_century: float = LUNATIONS_PER_CENTURY
    # coefficients of t^2, t^3, t^4
    poly: Tuple[float, float, float] = (0.00015437, -0.000000150, 0.00000000073)

    # Tet always falls inside [window_start, window_end] as (month, day)
    window_start: Tuple[int, int] = (1, 15)
    window_end: Tuple[int, int] = (2, 18)

    def __post_init__(self) -> None:
        if self.synodic_month <= 0 or self.tropical_year <= 0:
            raise ValueError("synodic_month and tropical_year must be positive")
        if self.lunations_per_century <= 0:
            raise ValueError("lunations_per_century must be positive")
        if len(self.poly) != 3:
            raise ValueError("poly must hold the t^2, t^3, t^4 coefficients")
        if not (self.window_start < self.window_end):
            raise ValueError("window_start must precede window_end")

    @property
    def year_excess(self) -> float:
        """Days by which a tropical year exceeds twelve synodic months."""
        return self.tropical_year - 12 * self.synodic_month


@dataclass(frozen=True)
class LeapParams:
    """
    Simplified Metonic placement: a lunar year is a leap year when its
    offset from ``reference_year`` modulo ``cycle_years`` is a leap residue.
    """
    reference_year: int = REFERENCE_YEAR
    cycle_years: int = 19
    leap_residues: Tuple[int, ...] = (0, 2, 5, 7, 10, 13, 15, 18)

    def __post_init__(self) -> None:
        if self.cycle_years <= 0:
            raise ValueError("cycle_years must be positive")
        if any(not (0 <= r < self.cycle_years) for r in self.leap_residues):
            raise ValueError("leap_residues must lie in 0..cycle_years-1")
