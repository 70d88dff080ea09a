# bluetraffic/viz/widgets/time_slider.py
import folium

from bluetraffic.traffic.minutes import ANY_TIME, MINUTES_PER_DAY, format_time

ANY_TIME_LABEL = "(any time)"


def build_time_slider(time_filter: int):
    """
    Floating "Filter by time" slider.

    The label follows the thumb while dragging; releasing it reloads the
    page with ?t=<minute> (-1 for any time).
    """
    label = format_time(time_filter)
    any_display = "block" if time_filter == ANY_TIME else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 13px;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 260px;
}}
#time-filter time,
#time-filter em {{
  display: block;
}}
#any-time {{
  color: #888;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}" value="{time_filter}">
  </label>
  <time id="selected-time">{label}</time>
  <em id="any-time" style="display:{any_display};">{ANY_TIME_LABEL}</em>
</div>

<script>
function formatMinute(minutes) {{
  const date = new Date(0, 0, 0, 0, minutes);
  return date.toLocaleString("en-US", {{ timeStyle: "short" }});
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    if (t === {ANY_TIME}) {{
      selected.textContent = "";
      anyTime.style.display = "block";
    }} else {{
      selected.textContent = formatMinute(t);
      anyTime.style.display = "none";
    }}
  }});

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("t", String(slider.value));
    window.location.href = url.toString();
  }});
}});
</script>
"""
    )
