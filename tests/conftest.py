from __future__ import annotations

from datetime import datetime

import pytest

from bluetraffic.traffic.types import Station, Trip


def at(hhmm: str, day: int = 1) -> datetime:
    h, m = hhmm.split(":")
    return datetime(2024, 3, day, int(h), int(m), 17)


def make_trip(start: str, end: str, started: str | None, ended: str | None) -> Trip:
    return Trip(
        start_station_id=start,
        end_station_id=end,
        started_at=at(started) if started else None,
        ended_at=at(ended) if ended else None,
    )


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(short_name="A", name="Alpha", lat=42.36, lon=-71.09),
        Station(short_name="B", name="Bravo", lat=42.35, lon=-71.06),
        Station(short_name="C", name="Charlie", lat=42.37, lon=-71.11),
    ]


@pytest.fixture
def trips() -> list[Trip]:
    return [
        make_trip("A", "B", "00:10", "00:20"),
        make_trip("B", "A", "00:50", "01:05"),
        make_trip("A", "C", "08:00", "08:25"),
        make_trip("C", "A", "08:30", "09:40"),
        make_trip("B", "B", "12:00", "12:00"),
        make_trip("A", "B", "23:30", "23:59"),
        make_trip("C", "B", "23:55", "00:15"),
        make_trip("Z9", "A", "17:00", "17:45"),
        make_trip("A", "Q1", "17:10", "17:30"),
    ]
