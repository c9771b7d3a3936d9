from collections.abc import Iterator

from route_kit.domain.entities.geography import Coord
from route_kit.domain.entities.route import Route
from route_kit.domain.mechanics.mechanics_geometry import position_after


class RouteSampler:
    """Positions every ``interval_m`` metres along a route, starting at its first point."""

    def __init__(self, route: Route, interval_m: float):
        if not interval_m > 0:
            raise ValueError(f"interval must be > 0, got {interval_m}")
        self.route, self.interval_m = route, interval_m

    def __iter__(self) -> Iterator[Coord]:
        k = 0
        while True:
            # k * interval avoids drift from repeated addition
            p = position_after(self.route, k * self.interval_m)
            if p is None:
                return
            yield p
            k += 1


def sample(route: Route, interval_m: float) -> RouteSampler:
    return RouteSampler(route, interval_m)
