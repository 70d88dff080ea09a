# bluetraffic/traffic/scale.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from bluetraffic.traffic.minutes import ANY_TIME
from bluetraffic.traffic.types import AnnotatedStation

# unfiltered radii cover whole-day totals
UNFILTERED_RADIUS_RANGE = (0.0, 25.0)
FILTERED_RADIUS_RANGE = (3.0, 50.0)


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale from [0, domain_max] onto radius_range.
    """
    domain_max: float
    radius_range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        r0, r1 = self.radius_range
        t = math.sqrt(max(0.0, float(value))) / math.sqrt(self.domain_max)
        return r0 + (r1 - r0) * t


def radius_scale(stations: Sequence[AnnotatedStation], time_filter: int) -> RadiusScale:
    peak = max((s.total_traffic for s in stations), default=0)
    if peak <= 0:
        peak = 1

    rng = UNFILTERED_RADIUS_RANGE if time_filter == ANY_TIME else FILTERED_RADIUS_RANGE
    return RadiusScale(domain_max=float(peak), radius_range=rng)
