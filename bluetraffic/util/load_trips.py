# bluetraffic/util/load_trips.py
from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from colorama import Fore, Style

from bluetraffic.traffic.types import Trip

REQUIRED_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def _parse_one(value):
    ts = pd.to_datetime(value, errors="coerce")
    return None if pd.isna(ts) else pd.Timestamp(ts).to_pydatetime()


def _to_datetime_or_none(values: pd.Series) -> list:
    try:
        parsed = pd.to_datetime(values, errors="coerce", format="mixed")
    except ValueError:
        # UTC offsets differ across rows (DST); each row keeps its own wall clock
        return [_parse_one(v) for v in values]
    return [None if pd.isna(ts) else pd.Timestamp(ts).to_pydatetime() for ts in parsed]


def load_trips(trips_csv: str | Path) -> List[Trip]:
    """
    Loads a month of trips from a CSV with (at least):

      start_station_id, end_station_id, started_at, ended_at

    Timestamps are parsed here, once. A timestamp that does not parse is
    kept as None so the bucket index can count and skip the row.
    """
    trips_csv = Path(trips_csv)
    print(f"{Fore.CYAN}Reading trips from {trips_csv}…{Style.RESET_ALL}")

    df = pd.read_csv(
        trips_csv,
        dtype={"start_station_id": str, "end_station_id": str},
        keep_default_na=False,
    )
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {', '.join(missing)}")

    started = _to_datetime_or_none(df["started_at"])
    ended = _to_datetime_or_none(df["ended_at"])

    trips = [
        Trip(
            start_station_id=str(s0).strip(),
            end_station_id=str(s1).strip(),
            started_at=t0,
            ended_at=t1,
        )
        for s0, s1, t0, t1 in zip(df["start_station_id"], df["end_station_id"], started, ended)
    ]

    print(f"{Fore.GREEN}Loaded {len(trips):,} trips{Style.RESET_ALL}")
    return trips
