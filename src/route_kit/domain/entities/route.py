# domain/entities/route.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator

from route_kit.domain.entities.geography import Coord
from route_kit.domain.tags import (
    MetricList,
    TagList,
    clone_metrics,
    clone_tags,
    none_as_empty,
    tags_equal,
)


class SegmentType(str, Enum):
    START = "start"  # no incoming-edge data
    ALONG = "along"
    STOP = "stop"  # terminal point


@dataclass
class Waypoint:
    name: str | None
    lat: float
    lon: float
    tags: TagList = field(default_factory=list)
    metrics: MetricList = field(default_factory=list)

    @property
    def coord(self) -> Coord:
        return Coord(self.lat, self.lon)

    def clone(self) -> "Waypoint":
        return Waypoint(
            name=self.name,
            lat=self.lat,
            lon=self.lon,
            tags=clone_tags(self.tags),
            metrics=clone_metrics(self.metrics),
        )

    def represents_same(self, other: "Waypoint | None") -> bool:
        """Same coordinates, same name and the same tags in the same order."""
        if other is None:
            return False
        return (
            self.lat == other.lat
            and self.lon == other.lon
            and self.name == other.name
            and tags_equal(self.tags, other.tags)
        )


WaypointList = Annotated[list[Waypoint], BeforeValidator(none_as_empty)]


@dataclass
class Branch:
    """A side street that was not taken; display only."""

    lat: float
    lon: float
    tags: TagList = field(default_factory=list)
    name: str | None = None
    names: TagList = field(default_factory=list)  # language code -> name

    @property
    def coord(self) -> Coord:
        return Coord(self.lat, self.lon)

    def clone(self) -> "Branch":
        return Branch(
            lat=self.lat,
            lon=self.lon,
            tags=clone_tags(self.tags),
            name=self.name,
            names=clone_tags(self.names),
        )


BranchList = Annotated[list[Branch], BeforeValidator(none_as_empty)]


@dataclass
class Segment:
    type: SegmentType
    lat: float
    lon: float
    distance: float = 0.0  # cumulative metres from route start
    time: float = 0.0  # cumulative seconds from route start
    vehicle: str | None = None
    name: str | None = None
    tags: TagList = field(default_factory=list)
    metrics: MetricList = field(default_factory=list)
    points: WaypointList = field(default_factory=list)  # waypoints since previous segment
    names: TagList = field(default_factory=list)
    branches: BranchList = field(default_factory=list)

    @property
    def coord(self) -> Coord:
        return Coord(self.lat, self.lon)

    def clone(self) -> "Segment":
        return Segment(
            type=self.type,
            lat=self.lat,
            lon=self.lon,
            distance=self.distance,
            time=self.time,
            vehicle=self.vehicle,
            name=self.name,
            tags=clone_tags(self.tags),
            metrics=clone_metrics(self.metrics),
            points=[p.clone() for p in (self.points or ())],
            names=clone_tags(self.names),
            branches=[b.clone() for b in (self.branches or ())],
        )

    def __str__(self) -> str:
        who = ""
        if self.name is not None:
            who += f" {self.name}"
        if self.vehicle is not None:
            who += f" for {self.vehicle}"
        return f"Segment:{who} @{self.time}s {self.distance}m"


SegmentList = Annotated[list[Segment], BeforeValidator(none_as_empty)]


@dataclass
class Route:
    segments: SegmentList = field(default_factory=list)
    vehicle: str | None = None
    tags: TagList = field(default_factory=list)
    metrics: MetricList = field(default_factory=list)
    total_distance: float = 0.0
    total_time: float = 0.0
    has_times: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def clone(self) -> "Route":
        return Route(
            segments=[s.clone() for s in (self.segments or ())],
            vehicle=self.vehicle,
            tags=clone_tags(self.tags),
            metrics=clone_metrics(self.metrics),
            total_distance=self.total_distance,
            total_time=self.total_time,
            has_times=self.has_times,
            timestamp=self.timestamp,
        )
