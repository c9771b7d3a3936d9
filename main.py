# main.py
import sys
from pathlib import Path

from route_kit.app.build import build
from route_kit.domain.mechanics.mechanics_geometry import bounding_box, path_length_m
from route_kit.io.documents import decode_route
from route_kit.io.route_logging import emit


def run(doc: str, interval_m: float | None = None):
    app = build()
    route = decode_route(Path(doc).read_bytes())

    box = bounding_box(route)
    emit(app.log, "INFO", "route", segments=len(route.segments), length_m=path_length_m(route))
    emit(app.log, "INFO", "box", min=(box.min_lat, box.min_lon), max=(box.max_lat, box.max_lon))

    for k, p in enumerate(app.sample(route, interval_m)):
        emit(app.log, "INFO", "sample", k=k, lat=p.lat, lon=p.lon)


if __name__ == "__main__":
    run(sys.argv[1], float(sys.argv[2]) if len(sys.argv) > 2 else None)
