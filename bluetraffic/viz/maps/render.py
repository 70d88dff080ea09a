# bluetraffic/viz/maps/render.py
import json

import folium

from bluetraffic.viz.overlays.stations import add_traffic_circles
from bluetraffic.viz.widgets.time_slider import build_time_slider

CENTER_LAT = 42.36027
CENTER_LON = -71.09415


def _js_string(text: str) -> str:
    # JSON literal that cannot close the surrounding <script>
    return json.dumps(text).replace("</", "<\\/")


def render_map_document(
    *,
    annotated,
    scale,
    time_filter: int,
    title: str | None = None,
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=False,
    )

    # stations
    add_traffic_circles(m, annotated, scale)

    # slider (widget)
    m.get_root().html.add_child(build_time_slider(time_filter))

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 85vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%s;wrap.appendChild(t);" % _js_string(title) if title else ""}

  const slider = document.getElementById("time-filter");
  if (slider) wrap.appendChild(slider);
}});
</script>
"""
        )
    )

    return m.get_root().render()
