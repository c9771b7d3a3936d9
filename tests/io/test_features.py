import json

from route_kit.domain.entities.route import Route, Segment, SegmentType, Waypoint
from route_kit.domain.tags import Tag
from route_kit.io.features import to_feature_collection, to_geojson


def _route() -> Route:
    return Route(
        segments=[
            Segment(SegmentType.START, 0.0, 0.0, points=[Waypoint("home", 0.0, 0.0)]),
            Segment(
                SegmentType.ALONG,
                0.0,
                1.0,
                distance=100.0,
                time=10.0,
                vehicle="car",
                tags=[Tag("highway", "primary")],
            ),
            Segment(
                SegmentType.STOP,
                1.0,
                1.0,
                distance=200.0,
                time=25.0,
                points=[Waypoint("work", 1.0, 1.0, tags=[Tag("office", "yes")])],
            ),
        ]
    )


def test_one_line_per_traversed_segment_and_one_point_per_waypoint():
    fc = to_feature_collection(_route())
    kinds = [f["geometry"]["type"] for f in fc["features"]]
    assert kinds.count("LineString") == 2
    assert kinds.count("Point") == 2


def test_line_properties_and_coordinate_order():
    lines = [f for f in to_feature_collection(_route())["features"] if f["geometry"]["type"] == "LineString"]
    first, second = lines
    assert first["geometry"]["coordinates"] == [[0.0, 0.0], [1.0, 0.0]]  # lon, lat
    assert first["properties"] == {"highway": "primary", "time": 10.0, "distance": 100.0, "vehicle": "car"}
    assert "vehicle" not in second["properties"]


def test_point_properties_are_waypoint_tags():
    pts = [f for f in to_feature_collection(_route())["features"] if f["geometry"]["type"] == "Point"]
    assert pts[0]["properties"] == {}
    assert pts[1]["properties"] == {"office": "yes"}


def test_geojson_text_parses():
    doc = json.loads(to_geojson(_route()))
    assert doc["type"] == "FeatureCollection" and len(doc["features"]) == 4
