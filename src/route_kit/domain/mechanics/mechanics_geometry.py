# route_kit/domain/mechanics/mechanics_geometry.py
import logging
import math
from dataclasses import dataclass

import numpy as np

from route_kit.domain.entities.geography import (
    Box,
    Coord,
    haversine_m,
    lerp,
    planar_distance,
    project_fraction,
)
from route_kit.domain.entities.route import Route
from route_kit.errors import EmptyRouteError
from route_kit.io.route_logging import emit

log = logging.getLogger("route_kit.geometry")


@dataclass(frozen=True)
class Projection:
    coord: Coord
    index: int  # segment (pair start) the projection belongs to
    distance_m: float  # from route start
    time_s: float | None = None  # None when the route carries no timing


def extract_points(route: Route) -> list[Coord]:
    return [Coord(s.lat, s.lon) for s in route.segments]


def points_array(route: Route) -> np.ndarray:
    """(N, 2) array of [lat, lon] rows."""
    return np.array([[s.lat, s.lon] for s in route.segments], dtype=float).reshape(-1, 2)


def bounding_box(route: Route) -> Box:
    if route.is_empty:
        raise EmptyRouteError("bounding box of a route without segments")
    pts = points_array(route)
    lo, hi = pts.min(axis=0), pts.max(axis=0)
    return Box(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


def path_length_m(route: Route) -> float:
    pts = extract_points(route)
    return sum(haversine_m(pts[i], pts[i + 1]) for i in range(len(pts) - 1))


def position_after(route: Route, distance_m: float) -> Coord | None:
    """
    Position reached after travelling ``distance_m`` metres along the route.
    Returns None past the end of the route; never clamps.
    """
    if distance_m < 0:
        raise ValueError(f"distance must be >= 0, got {distance_m}")
    pts = extract_points(route)
    if not pts:
        return None
    if distance_m == 0:
        return pts[0]
    walked = 0.0
    for a, b in zip(pts, pts[1:]):
        L = haversine_m(a, b)
        if walked + L >= distance_m:
            if L == 0.0:
                return a
            return lerp(a, b, (distance_m - walked) / L)
        walked += L
    return None


def project_on(route: Route, c: Coord) -> Projection:
    """
    Nearest point of the route polyline to ``c``.

    Vertices and interior perpendicular feet are visited in index order
    (vertex i, then the foot on pair i..i+1); the first candidate at the
    smallest planar distance wins.
    """
    if route.is_empty:
        raise EmptyRouteError("cannot project onto a route without segments")
    segs = route.segments
    pts = extract_points(route)

    best_d = math.inf
    best: tuple[Coord, int, float | None] | None = None  # (coord, index, fraction or None)
    for i, p in enumerate(pts):
        d = planar_distance(c, p)
        if d < best_d:
            best_d, best = d, (p, i, None)
        if i + 1 == len(pts):
            break
        f = project_fraction(c, p, pts[i + 1])
        if f is None or not 0.0 < f < 1.0:
            continue
        foot = lerp(p, pts[i + 1], f)
        d = planar_distance(c, foot)
        if d < best_d:
            best_d, best = d, (foot, i, f)

    coord, i, f = best
    if f is None:
        proj = Projection(coord, i, segs[i].distance, segs[i].time if route.has_times else None)
    else:
        local = haversine_m(pts[i], coord)
        t = None
        if route.has_times and i == 0:
            t = segs[0].time
        elif route.has_times:
            pair = haversine_m(pts[i], pts[i + 1])
            t = segs[i].time + (segs[i + 1].time - segs[i].time) * (local / pair)
        proj = Projection(coord, i, segs[i].distance + local, t)
    if log.isEnabledFor(logging.DEBUG):
        emit(log, "DEBUG", "project_on", index=proj.index, on_vertex=f is None, error=best_d)
    return proj
