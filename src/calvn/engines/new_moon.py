"""
calvn.engines.new_moon
----------------------
Mean new moon from the Meeus lunation series, truncated after the t^4 term.

Accurate to about a day for several centuries around the epoch; it carries no
periodic terms and is not meant to match an ephemeris.
"""

from __future__ import annotations

import math
from typing import Tuple

from .interfaces import NumT
from .params import AstroParams


class NewMoonApproximator:
    def __init__(self, params: AstroParams):
        self.p = params

    def lunation_index(self, jd: NumT) -> int:
        """Whole synodic months elapsed between the reference Tet and ``jd``."""
        return math.floor((jd - self.p.reference_jdn) / self.p.synodic_month)

    def mean_new_moon(self, k: int) -> float:
        """JDE of mean new moon number ``k`` (k=0 is the epoch lunation)."""
        c2, c3, c4 = self.p.poly
        t = k / self.p.lunations_per_century
        t2 = t * t
        return (
            self.p.new_moon_epoch_jd
            + self.p.synodic_month * k
            + c2 * t2
            + c3 * t2 * t
            + c4 * t2 * t2
        )

    def nearest_new_moon(self, jd: NumT) -> int:
        return math.floor(self.mean_new_moon(self.lunation_index(jd)) + 0.5)

    def lunation_bounds(self, jd: NumT) -> Tuple[int, int]:
        """JDNs of the new moon attached to ``jd`` and of the one after it."""
        k = self.lunation_index(jd)
        return (
            math.floor(self.mean_new_moon(k) + 0.5),
            math.floor(self.mean_new_moon(k + 1) + 0.5),
        )
