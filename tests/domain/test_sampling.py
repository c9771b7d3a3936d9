import pytest

from route_kit.domain.entities.geography import Coord
from route_kit.domain.entities.route import Route, Segment, SegmentType
from route_kit.domain.mechanics.mechanics_geometry import path_length_m
from route_kit.domain.mechanics.mechanics_sampling import RouteSampler, sample


@pytest.fixture
def line() -> Route:
    return Route(
        segments=[
            Segment(SegmentType.START, 0.0, 0.0),
            Segment(SegmentType.STOP, 0.0, 1.0, distance=111_195.0),
        ]
    )


def test_samples_every_interval_including_end(line: Route):
    L = path_length_m(line)
    pts = list(sample(line, L / 4))
    assert len(pts) == 5
    assert pts[0] == Coord(0.0, 0.0)
    assert [p.lon for p in pts] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_sampler_is_restartable_and_pure(line: Route):
    before = line.clone()
    s = RouteSampler(line, 10_000.0)
    first, second = list(s), list(s)
    assert first == second
    assert len(first) == 12  # 0 .. 110 km of ~111.2 km
    assert line == before


def test_interval_longer_than_route_yields_start_only(line: Route):
    assert list(sample(line, 1e7)) == [Coord(0.0, 0.0)]


def test_empty_route_yields_nothing():
    assert list(sample(Route(), 5.0)) == []


@pytest.mark.parametrize("bad", [0.0, -5.0])
def test_interval_must_be_positive(line: Route, bad: float):
    with pytest.raises(ValueError):
        RouteSampler(line, bad)
