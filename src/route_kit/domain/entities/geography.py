import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6_371_000.0


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Coord:
    lat: float  # decimal degrees
    lon: float


@dataclass(frozen=True)
class Box:
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    def contains(self, c: Coord) -> bool:
        return self.min_lat <= c.lat <= self.max_lat and self.min_lon <= c.lon <= self.max_lon


def haversine_m(a: Coord, b: Coord) -> float:
    """
    Great-circle distance between two coordinates in metres.
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def planar_distance(a: Coord, b: Coord) -> float:
    # straight line in degree space
    return math.hypot(b.lon - a.lon, b.lat - a.lat)


def lerp(a: Coord, b: Coord, f: float) -> Coord:
    return Coord(a.lat + f * (b.lat - a.lat), a.lon + f * (b.lon - a.lon))


def project_fraction(c: Coord, a: Coord, b: Coord) -> float | None:
    """Fraction along a->b of the perpendicular foot of c; None for a degenerate pair."""
    dx, dy = b.lon - a.lon, b.lat - a.lat
    L2 = dx * dx + dy * dy
    if L2 == 0.0:
        return None
    return ((c.lon - a.lon) * dx + (c.lat - a.lat) * dy) / L2
