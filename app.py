import os

from bluetraffic.viz.app.traffic import serve_traffic_map

STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")
TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")


def main():
  port = int(os.environ.get("PORT", "8080"))
  host = os.environ.get("HOST", "127.0.0.1")
  debug = os.environ.get("DEBUG", "").lower() in {"1", "true", "yes"}

  serve_traffic_map(
      stations_file=STATIONS,
      trips_csv=TRIPS,
      host=host,
      port=port,
      debug=debug,
      title="Boston Bluebikes Traffic",
  )


if __name__ == "__main__":
  main()
