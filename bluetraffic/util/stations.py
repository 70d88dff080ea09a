# bluetraffic/util/stations.py
import json

from colorama import Fore, Style

from bluetraffic.traffic.types import Station

REQUIRED_FIELDS = ["short_name", "lat", "lon"]


def load_stations(path):
    """
    Load stations from a GBFS-style station information file
    ({"data": {"stations": [...]}}).
    Returns Station records with only the fields we care about.
    """
    print(f"{Fore.CYAN}Loading station registry…{Style.RESET_ALL}")
    with open(path) as f:
        doc = json.load(f)

    data = doc.get("data") if isinstance(doc, dict) else None
    raw = data.get("stations") if isinstance(data, dict) else None
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected {{\"data\": {{\"stations\": [...]}}}}")

    stations = []
    for s in raw:
        missing = [k for k in REQUIRED_FIELDS if k not in s]
        if missing:
            raise ValueError(f"station entry without {', '.join(missing)}: {s!r}")

        stations.append(
            Station(
                short_name=str(s["short_name"]),
                name=s.get("name", str(s["short_name"])),
                lat=float(s["lat"]),
                lon=float(s["lon"]),
            )
        )

    return stations
