# bluetraffic/traffic/context.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence

from bluetraffic.traffic.aggregate import (
    TrafficRollup,
    aggregate,
    merge_rollup,
    rollup_traffic,
    unattributed_traffic,
    validate_time_filter,
)
from bluetraffic.traffic.bucket_index import BucketIndex, build_bucket_index
from bluetraffic.traffic.minutes import ANY_TIME
from bluetraffic.traffic.scale import RadiusScale, radius_scale
from bluetraffic.traffic.types import AnnotatedStation, Station, Trip


@dataclass(frozen=True)
class TrafficContext:
    """
    Everything one slider position needs: the loaded stations and trips,
    the bucket index built from them, and the selected time filter.

    The slider never mutates a context; with_time_filter() hands back a
    new one sharing the same (read-only) data.
    """
    stations: Sequence[Station]
    trips: Sequence[Trip]
    bucket_index: BucketIndex
    time_filter: int = ANY_TIME

    @classmethod
    def load(cls, stations, trips, *, progress: bool = False):
        stations = tuple(stations)
        trips = tuple(trips)
        return cls(
            stations=stations,
            trips=trips,
            bucket_index=build_bucket_index(trips, progress=progress),
        )

    def with_time_filter(self, time_filter: int) -> "TrafficContext":
        return replace(self, time_filter=validate_time_filter(time_filter))

    def rollup(self) -> TrafficRollup:
        return rollup_traffic(self.trips, self.bucket_index, self.time_filter)

    def annotated(self, rollup: TrafficRollup | None = None) -> List[AnnotatedStation]:
        if rollup is None:
            return aggregate(self.stations, self.trips, self.bucket_index, self.time_filter)
        return merge_rollup(self.stations, rollup)

    def scale(self, annotated: Sequence[AnnotatedStation] | None = None) -> RadiusScale:
        if annotated is None:
            annotated = self.annotated()
        return radius_scale(annotated, self.time_filter)

    def unattributed(self, rollup: TrafficRollup | None = None) -> dict:
        if rollup is None:
            rollup = self.rollup()
        return unattributed_traffic(self.stations, rollup)
