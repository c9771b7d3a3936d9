# route_kit/domain/mechanics/mechanics_concat.py
import logging

from route_kit.domain.entities.route import Route, Segment, SegmentType, Waypoint
from route_kit.domain.tags import clone_tags
from route_kit.errors import ConcatenationError
from route_kit.io.route_logging import emit

log = logging.getLogger("route_kit.concat")


def _merge_points(kept: list[Waypoint], incoming: list[Waypoint], clone: bool) -> list[Waypoint]:
    points = list(kept)
    for wp in incoming:
        if not any(p.represents_same(wp) for p in points):
            points.append(wp.clone() if clone else wp)
    return points


def concatenate(a: Route | None, b: Route | None, clone: bool = True) -> Route | None:
    """
    Join two routes where ``a`` ends exactly where ``b`` starts.

    The shared point becomes one ALONG segment carrying a's fields and the
    waypoints of both sides; b's remaining segments are shifted by a's final
    distance and time. With ``clone=False`` b's segments are reused and
    shifted in place, so both inputs must be treated as consumed.
    """
    if a is None or a.is_empty:
        return b.clone() if (clone and b is not None) else b
    if b is None or b.is_empty:
        return a.clone() if clone else a

    end, start = a.segments[-1], b.segments[0]
    if end.lat != start.lat or end.lon != start.lon:
        emit(
            log,
            "ERROR",
            "concatenate_mismatch",
            end=(end.lat, end.lon),
            start=(start.lat, start.lon),
        )
        raise ConcatenationError(
            "routes can only be concatenated when the end of the first equals the start of the second"
        )

    segments: list[Segment] = [s.clone() if clone else s for s in a.segments[:-1]]

    merged = end.clone()
    merged.type = SegmentType.ALONG
    if start.points:
        merged.points = _merge_points(merged.points or [], start.points, clone)
    segments.append(merged)

    for s in b.segments[1:]:
        s = s.clone() if clone else s
        s.distance += end.distance
        s.time += end.time
        segments.append(s)

    tags = (a.tags or []) + (b.tags or [])
    route = Route(
        segments=segments,
        vehicle=a.vehicle if a.vehicle == b.vehicle else None,
        tags=clone_tags(tags) if clone else tags,
        total_distance=a.total_distance + b.total_distance,
        total_time=a.total_time + b.total_time,
        has_times=a.has_times and b.has_times,
    )
    emit(
        log,
        "DEBUG",
        "concatenate",
        left=len(a.segments),
        right=len(b.segments),
        merged=len(segments),
        clone=clone,
    )
    return route
