# bluetraffic/traffic/bucket_index.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from colorama import Fore, Style
from tqdm import tqdm

from bluetraffic.traffic.minutes import MINUTES_PER_DAY, minutes_since_midnight
from bluetraffic.traffic.types import Trip


@dataclass(frozen=True)
class BucketIndex:
    """
    departures_by_minute[m]: trips that started at minute-of-day m
    arrivals_by_minute[m]:   trips that ended at minute-of-day m
    malformed:               trips left out of both because a timestamp was missing
    """
    departures_by_minute: Tuple[Tuple[Trip, ...], ...]
    arrivals_by_minute: Tuple[Tuple[Trip, ...], ...]
    malformed: int = 0

    def __len__(self) -> int:
        return sum(len(b) for b in self.departures_by_minute)


def build_bucket_index(trips: Iterable[Trip], *, progress: bool = False) -> BucketIndex:
    """
    Partition trips by departure minute and by arrival minute.

    Run once per dataset load. A trip whose started_at or ended_at did not
    parse is kept out of both arrays so no slot ever holds a trip with an
    undefined minute; the number of such trips is reported once.
    """
    departures: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
    arrivals: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
    malformed = 0

    it = trips
    if progress:
        it = tqdm(trips, desc="Bucketing trips")

    for trip in it:
        if trip.started_at is None or trip.ended_at is None:
            malformed += 1
            continue

        departures[minutes_since_midnight(trip.started_at)].append(trip)
        arrivals[minutes_since_midnight(trip.ended_at)].append(trip)

    if malformed:
        print(
            f"{Fore.YELLOW}Skipped {malformed} trip(s) with unparseable timestamps "
            f"while bucketing{Style.RESET_ALL}"
        )

    return BucketIndex(
        departures_by_minute=tuple(tuple(b) for b in departures),
        arrivals_by_minute=tuple(tuple(b) for b in arrivals),
        malformed=malformed,
    )
