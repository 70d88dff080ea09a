# bluetraffic/traffic/window.py
from __future__ import annotations

from itertools import chain
from typing import List, Sequence, Tuple

from bluetraffic.traffic.minutes import MINUTES_PER_DAY
from bluetraffic.traffic.types import Trip

WINDOW_MINUTES = 60


def _check_minute(minute: int) -> int:
    minute = int(minute)
    if not 0 <= minute < MINUTES_PER_DAY:
        raise ValueError(f"minute must be in [0, {MINUTES_PER_DAY - 1}], got {minute}")
    return minute


def window_bounds(center: int) -> Tuple[int, int]:
    """
    (min_minute, max_minute) of the ±60 minute window around center,
    both taken modulo 1440. min_minute > max_minute means the window wraps
    past midnight.
    """
    center = _check_minute(center)
    min_minute = (center - WINDOW_MINUTES + MINUTES_PER_DAY) % MINUTES_PER_DAY
    max_minute = (center + WINDOW_MINUTES) % MINUTES_PER_DAY
    return min_minute, max_minute


def window_minutes(center: int) -> List[int]:
    min_minute, max_minute = window_bounds(center)
    if min_minute <= max_minute:
        return list(range(min_minute, max_minute + 1))
    return list(range(min_minute, MINUTES_PER_DAY)) + list(range(0, max_minute + 1))


def select_window(buckets: Sequence[Sequence[Trip]], center: int) -> List[Trip]:
    """
    Flatten the buckets inside the circular window around center.
    Trip order is not meaningful.
    """
    min_minute, max_minute = window_bounds(center)

    if min_minute > max_minute:
        selected = chain(buckets[min_minute:], buckets[: max_minute + 1])
    else:
        selected = buckets[min_minute : max_minute + 1]

    return list(chain.from_iterable(selected))
