from __future__ import annotations

from geosvgmap.models import GeoBounds
from geosvgmap.paths import build_geometry_path, build_ring_set_path

from conftest import UNIT_SQUARE


UNIT_BOUNDS = GeoBounds(min_lat=0.0, max_lat=1.0, min_lng=0.0, max_lng=1.0)


def test_single_ring_tokens():
    path = build_ring_set_path([UNIT_SQUARE], UNIT_BOUNDS, 100, 100)
    tokens = path.split()
    assert tokens.count("M") == 1
    assert tokens.count("Z") == 1
    assert len(tokens) == len(UNIT_SQUARE) + 2
    assert path == "M 0,100 100,100 100,0 0,0 0,100 Z"


def test_holes_follow_outer_ring():
    hole = [[0.25, 0.25], [0.75, 0.25], [0.75, 0.75], [0.25, 0.25]]
    path = build_ring_set_path([UNIT_SQUARE, hole], UNIT_BOUNDS, 100, 100)
    assert path == "M 0,100 100,100 100,0 0,0 0,100 Z M 25,75 75,75 75,25 25,75 Z"
    assert not path.endswith(" ")


def test_fractional_coordinates_keep_full_precision():
    path = build_ring_set_path([[[1 / 3, 0], [0, 0]]], UNIT_BOUNDS, 100, 100)
    assert path == f"M {(1 / 3) * 100!r},100 0,100 Z"
    assert "." in path.split()[1]


def test_precision_rounds_coordinates():
    path = build_ring_set_path([[[1 / 3, 0], [0, 0]]], UNIT_BOUNDS, 100, 100, precision=2)
    assert path == "M 33.33,100 0,100 Z"


def test_multipolygon_is_one_compound_path():
    feature = {
        "geometry": {
            "type": "MultiPolygon",
            "coordinates": [
                [[[0, 0], [0.5, 0], [0, 0]]],
                [[[0.5, 1], [1, 1], [0.5, 1]]],
            ],
        }
    }
    path = build_geometry_path(feature, UNIT_BOUNDS, 100, 100)
    assert path == "M 0,100 50,100 0,100 Z M 50,0 100,0 50,0 Z"


def test_unsupported_geometry_yields_empty_path():
    feature = {"geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}}
    assert build_geometry_path(feature, UNIT_BOUNDS, 100, 100) == ""
    assert build_geometry_path({"properties": {}}, UNIT_BOUNDS, 100, 100) == ""
