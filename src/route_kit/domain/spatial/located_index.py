# route_kit/domain/spatial/located_index.py
import math
from collections import defaultdict
from collections.abc import Hashable

from route_kit.domain.entities.geography import Box, Coord


class NaiveLocatedIndex:
    """
    Unindexed baseline: every query scans everything.
    Accelerated indexes are checked against this one.
    """

    def __init__(self):
        self._data: list[tuple[Coord, Hashable]] = []

    def __len__(self) -> int:
        return len(self._data)

    def add(self, location: Coord, payload: Hashable) -> None:
        self._data.append((location, payload))

    def get_inside(self, box: Box) -> set:
        return {payload for loc, payload in self._data if box.contains(loc)}


class GridLocatedIndex:
    """Buckets entries on a regular lat/lon grid of ``cell_deg`` sized cells."""

    def __init__(self, cell_deg: float = 0.01):
        if not cell_deg > 0:
            raise ValueError(f"cell_deg must be > 0, got {cell_deg}")
        self.cell_deg = cell_deg
        self._cells: dict[tuple[int, int], list[tuple[Coord, Hashable]]] = defaultdict(list)
        self._off_grid: list[tuple[Coord, Hashable]] = []  # NaN/inf locations
        self._n = 0

    def __len__(self) -> int:
        return self._n

    def _cell(self, lat: float, lon: float) -> tuple[int, int] | None:
        r, c = lat / self.cell_deg, lon / self.cell_deg
        if not (math.isfinite(r) and math.isfinite(c)):
            return None
        return math.floor(r), math.floor(c)

    def add(self, location: Coord, payload: Hashable) -> None:
        cell = self._cell(location.lat, location.lon)
        if cell is None:
            self._off_grid.append((location, payload))
        else:
            self._cells[cell].append((location, payload))
        self._n += 1

    def _candidates(self, box: Box):
        yield from self._off_grid
        lo = self._cell(box.min_lat, box.min_lon)
        hi = self._cell(box.max_lat, box.max_lon)
        if lo is None or hi is None or (hi[0] - lo[0] + 1) * (hi[1] - lo[1] + 1) > len(self._cells):
            # unbounded box, or it spans more cells than are occupied
            for bucket in self._cells.values():
                yield from bucket
            return
        for r in range(lo[0], hi[0] + 1):
            for c in range(lo[1], hi[1] + 1):
                yield from self._cells.get((r, c), ())

    def get_inside(self, box: Box) -> set:
        # cells only narrow the scan; containment is decided on the stored location
        return {payload for loc, payload in self._candidates(box) if box.contains(loc)}
