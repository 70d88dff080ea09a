# bluetraffic/viz/overlays/stations.py
from html import escape

import folium

FILL_COLOR = "steelblue"
STROKE_COLOR = "white"


def traffic_tooltip(s) -> str:
    return f"{s.total_traffic} trips ({s.departures} departures, {s.arrivals} arrivals)"


def add_traffic_circles(m, annotated, scale):
    """
    One circle per station, radius from the traffic scale.
    annotated: list[AnnotatedStation]
    scale: RadiusScale
    """
    for s in annotated:
        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=scale(s.total_traffic),
            color=STROKE_COLOR,
            weight=1,
            fill=True,
            fill_color=FILL_COLOR,
            fill_opacity=0.6,
            tooltip=traffic_tooltip(s),
            popup=f"<b>{escape(s.name)}</b><br>Station: {escape(s.short_name)}",
        ).add_to(m)
