# bluetraffic/viz/app/traffic.py
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from colorama import Fore, Style
from flask import Flask, jsonify, request

from bluetraffic.traffic.context import TrafficContext
from bluetraffic.traffic.minutes import ANY_TIME, MINUTES_PER_DAY, format_time
from bluetraffic.util.load_trips import load_trips
from bluetraffic.util.stations import load_stations
from bluetraffic.viz.maps.render import render_map_document

DEFAULT_TITLE = "Bike Share Traffic"


def _clamp_time(t: int) -> int:
    return max(ANY_TIME, min(int(t), MINUTES_PER_DAY - 1))


def build_app(context: TrafficContext, *, title: str | None = DEFAULT_TITLE) -> Flask:
    """
    Flask app over an already-loaded TrafficContext.

    Routes:
      /             map page, ?t=<minute> (-1 or absent = any time)
      /api/traffic  same aggregation as JSON
    """
    app = Flask(__name__)

    def _resolve_context() -> TrafficContext:
        t_req = request.args.get("t", ANY_TIME, type=int)
        return context.with_time_filter(_clamp_time(t_req))

    @app.route("/")
    def _index():
        ctx = _resolve_context()
        annotated = ctx.annotated()

        return render_map_document(
            annotated=annotated,
            scale=ctx.scale(annotated),
            time_filter=ctx.time_filter,
            title=title,
        )

    @app.route("/api/traffic")
    def _traffic():
        ctx = _resolve_context()
        rollup = ctx.rollup()
        annotated = ctx.annotated(rollup)
        scale = ctx.scale(annotated)

        return jsonify(
            {
                "time_filter": ctx.time_filter,
                "label": format_time(ctx.time_filter),
                "scale": {
                    "domain": [0, scale.domain_max],
                    "range": list(scale.radius_range),
                },
                "stations": [asdict(s) for s in annotated],
                "unattributed": ctx.unattributed(rollup),
                "malformed_trips": ctx.bucket_index.malformed,
            }
        )

    return app


def serve_traffic_map(
    *,
    stations_file: str | Path,
    trips_csv: str | Path,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = DEFAULT_TITLE,
):
    """
    Load stations + trips once, bucket the trips, then serve the map.
    """
    stations = load_stations(stations_file)
    trips = load_trips(trips_csv)

    print(f"{Fore.CYAN}Building minute buckets…{Style.RESET_ALL}")
    context = TrafficContext.load(stations, trips, progress=True)
    print(
        f"{Fore.GREEN}Ready: {len(context.stations)} stations, "
        f"{len(context.bucket_index):,} bucketed trips{Style.RESET_ALL}"
    )

    app = build_app(context, title=title)
    app.run(host=host, port=int(port), debug=bool(debug))
