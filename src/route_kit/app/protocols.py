from collections.abc import Hashable, Set
from typing import Protocol, TypeVar, runtime_checkable

from route_kit.domain.entities.geography import Box, Coord
from route_kit.domain.entities.route import Route

P = TypeVar("P", bound=Hashable)


# ------------- Spatial --------------------
@runtime_checkable
class LocatedObjectIndex(Protocol[P]):
    """
    Responsibilities:
      • Store (location, payload) pairs; duplicates allowed.
      • Return the distinct payloads located inside a box (edges inclusive).
    Any implementation must answer exactly like NaiveLocatedIndex.
    """

    def add(self, location: Coord, payload: P) -> None: ...
    def get_inside(self, box: Box) -> Set[P]: ...


# ------------- Route building --------------------
@runtime_checkable
class RouteSource(Protocol):
    """
    External route builder. Delivers ordered segments with non-decreasing
    distance/time and START/ALONG/STOP typing; nothing here re-validates them.
    """

    def build_route(self, origin: Coord, destination: Coord) -> Route: ...


# --------------- Local search -------------------------
@runtime_checkable
class Problem(Protocol):
    """TSP-with-time-windows problem definition owned by the solver."""

    @property
    def size(self) -> int: ...


@runtime_checkable
class CandidateRoute(Protocol):
    """Visiting order under evaluation."""

    def __iter__(self): ...
    def __len__(self) -> int: ...


@runtime_checkable
class LocalSearchOperator(Protocol):
    """
    A single move (swap, relocate, 2-opt, ...) applied to a candidate route.
    apply() returns (improved, delta); delta is the signed change in objective.
    A search loop keeps applying operators while one of them improves.
    """

    name: str

    def apply(self, problem: Problem, route: CandidateRoute) -> tuple[bool, float]: ...
