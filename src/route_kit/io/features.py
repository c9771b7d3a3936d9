# io/features.py
import json

from route_kit.domain.entities.route import Route


def _lonlat(lat: float, lon: float) -> list[float]:
    return [lon, lat]


def to_feature_collection(route: Route) -> dict:
    """
    GeoJSON-shaped export: a LineString for every traversed segment
    (previous point -> this point) and a Point for every waypoint.
    """
    features = []
    segs = route.segments
    for i, seg in enumerate(segs):
        if i > 0:
            props = {t.key: t.value for t in (seg.tags or ())}
            props["time"] = seg.time
            props["distance"] = seg.distance
            if seg.vehicle is not None:
                props["vehicle"] = seg.vehicle
            prev = segs[i - 1]
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [_lonlat(prev.lat, prev.lon), _lonlat(seg.lat, seg.lon)],
                    },
                    "properties": props,
                }
            )
        for wp in seg.points or ():
            features.append(
                {
                    "type": "Feature",
                    "geometry": {"type": "Point", "coordinates": _lonlat(wp.lat, wp.lon)},
                    "properties": {t.key: t.value for t in (wp.tags or ())},
                }
            )
    return {"type": "FeatureCollection", "features": features}


def to_geojson(route: Route) -> str:
    return json.dumps(to_feature_collection(route))
