import json
from datetime import datetime

import pytest

from bluetraffic.util.load_trips import load_trips
from bluetraffic.util.stations import load_stations


def test_load_stations(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(
        json.dumps(
            {
                "data": {
                    "stations": [
                        {"short_name": "A32000", "name": "Kendall T", "lat": "42.3625", "lon": "-71.0861", "capacity": 19},
                        {"short_name": 12, "name": "MIT", "lat": 42.3581, "lon": -71.0932},
                    ]
                }
            }
        )
    )

    stations = load_stations(path)

    assert [s.short_name for s in stations] == ["A32000", "12"]
    assert stations[0].lat == pytest.approx(42.3625)
    assert stations[0].lon == pytest.approx(-71.0861)
    assert stations[1].name == "MIT"


def test_load_stations_requires_short_name(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {"stations": [{"name": "x", "lat": 0, "lon": 0}]}}))

    with pytest.raises(ValueError):
        load_stations(path)


def test_load_trips_parses_timestamps_once(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text(
        "ride_id,start_station_id,end_station_id,started_at,ended_at,is_member\n"
        "r1,A32000,00001,2024-03-01 00:10:12,2024-03-01 00:20:00,1\n"
        "r2,00001,A32000,not a date,2024-03-01 01:00:00,0\n"
        "r3,00001,A32000,2024-03-02 23:59:59.5,,1\n"
    )

    trips = load_trips(path)

    assert len(trips) == 3
    assert trips[0].start_station_id == "A32000"
    assert trips[0].end_station_id == "00001"
    assert trips[0].started_at == datetime(2024, 3, 1, 0, 10, 12)
    assert trips[1].started_at is None
    assert trips[1].ended_at == datetime(2024, 3, 1, 1, 0, 0)
    assert trips[2].started_at.hour == 23 and trips[2].started_at.minute == 59
    assert trips[2].ended_at is None


def test_load_trips_missing_columns(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text("start_station_id,started_at\nA,2024-03-01 00:00:00\n")

    with pytest.raises(ValueError, match="end_station_id"):
        load_trips(path)


def test_load_trips_keeps_wall_clock_across_utc_offset_change(tmp_path):
    path = tmp_path / "trips.csv"
    path.write_text(
        "start_station_id,end_station_id,started_at,ended_at\n"
        "A,B,2024-03-01T00:10:00-05:00,2024-03-01T00:20:00-05:00\n"
        "B,A,2024-03-15T08:30:00-04:00,2024-03-15T09:05:00-04:00\n"
        "A,A,garbage,2024-03-15T09:05:00-04:00\n"
    )

    trips = load_trips(path)

    assert len(trips) == 3
    assert (trips[0].started_at.hour, trips[0].started_at.minute) == (0, 10)
    assert (trips[0].ended_at.hour, trips[0].ended_at.minute) == (0, 20)
    assert (trips[1].started_at.hour, trips[1].started_at.minute) == (8, 30)
    assert trips[2].started_at is None
    assert (trips[2].ended_at.hour, trips[2].ended_at.minute) == (9, 5)


@pytest.mark.parametrize(
    "doc",
    [
        {"stations": []},
        {"data": {}},
        {"data": {"stations": {"A": {}}}},
        [],
    ],
)
def test_load_stations_rejects_bad_envelope(tmp_path, doc):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps(doc))

    with pytest.raises(ValueError):
        load_stations(path)


@pytest.mark.parametrize("dropped", ["lat", "lon"])
def test_load_stations_requires_coordinates(tmp_path, dropped):
    entry = {"short_name": "A1", "name": "x", "lat": 42.0, "lon": -71.0}
    del entry[dropped]
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"data": {"stations": [entry]}}))

    with pytest.raises(ValueError, match=dropped):
        load_stations(path)
