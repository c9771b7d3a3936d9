from route_kit.domain.entities.route import Branch, Route, Segment, SegmentType, Waypoint
from route_kit.domain.tags import (
    Metric,
    Tag,
    first_value,
    metrics_from_mapping,
    metrics_to_pairs,
    tags_equal,
    tags_from_mapping,
    tags_from_pairs,
    tags_to_pairs,
    values,
)


def _segment() -> Segment:
    return Segment(
        SegmentType.ALONG,
        51.0,
        4.0,
        distance=10.0,
        time=2.0,
        vehicle="car",
        name="Main St",
        tags=[Tag("highway", "residential")],
        metrics=[Metric("speed", 13.9)],
        points=[Waypoint("stop", 51.0, 4.0, tags=[Tag("k", "v")])],
        names=[Tag("nl", "Hoofdstraat")],
        branches=[Branch(51.1, 4.1, name="Side St")],
    )


# ---------- Cloning


def test_segment_clone_is_deep():
    s = _segment()
    c = s.clone()
    assert c == s
    c.tags[0].value = "primary"
    c.points[0].tags.append(Tag("x", "y"))
    c.branches[0].name = "Other"
    c.names[0].value = "Rue"
    assert s.tags[0].value == "residential"
    assert len(s.points[0].tags) == 1
    assert s.branches[0].name == "Side St"
    assert s.names[0].value == "Hoofdstraat"


def test_route_clone_is_deep():
    r = Route(segments=[_segment()], vehicle="car", tags=[Tag("a", "b")], has_times=True)
    c = r.clone()
    assert c == r
    c.segments[0].distance = 99.0
    c.tags.clear()
    assert r.segments[0].distance == 10.0 and r.tags == [Tag("a", "b")]


# ---------- Waypoint equality


def test_represents_same_treats_none_and_empty_tags_alike():
    a = Waypoint("p", 1.0, 2.0, tags=None)
    b = Waypoint("p", 1.0, 2.0, tags=[])
    assert a.represents_same(b) and b.represents_same(a)
    assert a.represents_same(a)


def test_represents_same_is_order_sensitive():
    a = Waypoint("p", 1.0, 2.0, tags=[Tag("a", "1"), Tag("b", "2")])
    b = Waypoint("p", 1.0, 2.0, tags=[Tag("b", "2"), Tag("a", "1")])
    assert not a.represents_same(b)


def test_represents_same_rejects_other_fields():
    a = Waypoint("p", 1.0, 2.0)
    assert not a.represents_same(Waypoint("q", 1.0, 2.0))
    assert not a.represents_same(Waypoint("p", 1.0, 2.5))
    assert not a.represents_same(Waypoint("p", 1.0, 2.0, tags=[Tag("k", "v")]))
    assert not a.represents_same(None)


# ---------- Tag helpers


def test_tag_conversions():
    tags = tags_from_mapping({"highway": "primary", "name": "A1"})
    assert tags_to_pairs(tags) == [("highway", "primary"), ("name", "A1")]
    assert tags_from_pairs([("a", "b")]) == [Tag("a", "b")]
    assert tags_to_pairs(None) == [] and tags_from_mapping(None) == []


def test_tag_lookups():
    tags = [Tag("ref", "N1"), Tag("name", "x"), Tag("ref", "E40")]
    assert first_value(tags, "ref") == "N1"
    assert values(tags, "ref") == ["N1", "E40"]
    assert first_value(None, "ref") is None
    assert values(tags, "missing") == []


def test_metric_conversions():
    ms = metrics_from_mapping({"distance": 12, "time": 3.5})
    assert metrics_to_pairs(ms) == [("distance", 12.0), ("time", 3.5)]
    assert isinstance(ms[0].value, float)


def test_tags_equal_is_symmetric_on_empty():
    assert tags_equal(None, []) and tags_equal([], None) and tags_equal(None, None)
    assert not tags_equal(None, [Tag("a", "b")])
    assert not tags_equal([Tag("a", "b")], None)


# ---------- Text forms


def test_text_forms():
    assert str(Tag("k", "v")) == "k=v"
    assert str(_segment()) == "Segment: Main St for car @2.0s 10.0m"
    assert str(Segment(SegmentType.START, 0.0, 0.0)) == "Segment: @0.0s 0.0m"
    assert str(Segment(SegmentType.STOP, 0.0, 0.0, vehicle="bike")) == "Segment: for bike @0.0s 0.0m"
