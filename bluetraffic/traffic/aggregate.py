# bluetraffic/traffic/aggregate.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from bluetraffic.traffic.bucket_index import BucketIndex
from bluetraffic.traffic.minutes import ANY_TIME, MINUTES_PER_DAY
from bluetraffic.traffic.types import AnnotatedStation, Station, Trip
from bluetraffic.traffic.window import select_window


@dataclass(frozen=True)
class TrafficRollup:
    """
    Trip counts keyed by station id, before merging onto stations.
    Ids that match no station are kept here.
    """
    departures: Counter
    arrivals: Counter


def validate_time_filter(time_filter: int) -> int:
    time_filter = int(time_filter)
    if not ANY_TIME <= time_filter < MINUTES_PER_DAY:
        raise ValueError(
            f"time_filter must be {ANY_TIME} or a minute in [0, {MINUTES_PER_DAY - 1}], "
            f"got {time_filter}"
        )
    return time_filter


def rollup_traffic(
    trips: Sequence[Trip],
    bucket_index: BucketIndex,
    time_filter: int,
) -> TrafficRollup:
    time_filter = validate_time_filter(time_filter)

    if time_filter == ANY_TIME:
        departing: Iterable[Trip] = trips
        arriving: Iterable[Trip] = trips
    else:
        departing = select_window(bucket_index.departures_by_minute, time_filter)
        arriving = select_window(bucket_index.arrivals_by_minute, time_filter)

    return TrafficRollup(
        departures=Counter(t.start_station_id for t in departing),
        arrivals=Counter(t.end_station_id for t in arriving),
    )


def merge_rollup(stations: Sequence[Station], rollup: TrafficRollup) -> List[AnnotatedStation]:
    return [
        AnnotatedStation.from_station(
            s,
            departures=rollup.departures.get(s.short_name, 0),
            arrivals=rollup.arrivals.get(s.short_name, 0),
        )
        for s in stations
    ]


def aggregate(
    stations: Sequence[Station],
    trips: Sequence[Trip],
    bucket_index: BucketIndex,
    time_filter: int,
) -> List[AnnotatedStation]:
    """
    Per-station departures/arrivals/total_traffic for one time filter.

    time_filter == -1 counts every trip; otherwise only trips whose
    departure (resp. arrival) minute lies in the circular ±60 minute
    window around time_filter. Returns new records in station order;
    the inputs are left untouched.
    """
    return merge_rollup(stations, rollup_traffic(trips, bucket_index, time_filter))


def unattributed_traffic(stations: Sequence[Station], rollup: TrafficRollup) -> Dict[str, int]:
    known = {s.short_name for s in stations}
    return {
        "departures": sum(n for sid, n in rollup.departures.items() if sid not in known),
        "arrivals": sum(n for sid, n in rollup.arrivals.items() if sid not in known),
    }
