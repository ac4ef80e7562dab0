from __future__ import annotations

import math

from geosvgmap.bounds import compute_bounds
from geosvgmap.models import GeoBounds

from conftest import UNIT_SQUARE, feature_collection, polygon_feature


def test_bounds_of_unit_square(unit_square_document):
    assert compute_bounds(unit_square_document) == GeoBounds(
        min_lat=0.0, max_lat=1.0, min_lng=0.0, max_lng=1.0
    )


def test_bounds_span_polygon_and_multipolygon(two_region_document):
    bounds = compute_bounds(two_region_document)
    assert (bounds.min_lat, bounds.max_lat) == (40.0, 50.0)
    assert (bounds.min_lng, bounds.max_lng) == (10.0, 30.0)
    assert not bounds.is_degenerate


def test_holes_do_not_widen_bounds():
    hole_outside = [[-50, -50], [50, -50], [50, 50], [-50, -50]]
    document = feature_collection(polygon_feature(UNIT_SQUARE, hole_outside))
    bounds = compute_bounds(document)
    assert bounds == GeoBounds(min_lat=0.0, max_lat=1.0, min_lng=0.0, max_lng=1.0)


def test_non_polygon_geometries_are_ignored():
    point = {"geometry": {"type": "Point", "coordinates": [100, 80]}, "properties": {}}
    no_geometry = {"geometry": None, "properties": {"name": "nowhere"}}
    document = feature_collection(polygon_feature(UNIT_SQUARE), point, no_geometry)
    assert compute_bounds(document).max_lng == 1.0


def test_empty_document_is_degenerate():
    bounds = compute_bounds(feature_collection())
    assert bounds.min_lat == math.inf
    assert bounds.max_lng == -math.inf
    assert bounds.is_degenerate


def test_single_latitude_is_degenerate():
    document = feature_collection(polygon_feature([[0, 5], [10, 5], [0, 5]]))
    bounds = compute_bounds(document)
    assert bounds.lat_span == 0
    assert bounds.lng_span == 10
    assert bounds.is_degenerate
