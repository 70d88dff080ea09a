# bluetraffic/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Station:
    short_name: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime | None
    ended_at: datetime | None


@dataclass(frozen=True)
class AnnotatedStation:
    """
    A station plus the traffic counted for it under one time filter.
    Always built fresh from a Station, never patched in place.
    """
    short_name: str
    name: str
    lat: float
    lon: float
    departures: int = 0
    arrivals: int = 0
    total_traffic: int = 0

    @classmethod
    def from_station(cls, station: Station, *, departures: int, arrivals: int):
        return cls(
            short_name=station.short_name,
            name=station.name,
            lat=station.lat,
            lon=station.lon,
            departures=int(departures),
            arrivals=int(arrivals),
            total_traffic=int(departures) + int(arrivals),
        )
