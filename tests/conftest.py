from __future__ import annotations

from typing import Any

import pytest


def polygon_feature(ring: list[list[float]], *holes: list[list[float]], **properties: Any) -> dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring, *holes]},
        "properties": dict(properties),
    }


def feature_collection(*features: dict[str, Any]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


UNIT_SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]


@pytest.fixture
def unit_square_document() -> dict[str, Any]:
    return feature_collection(polygon_feature(UNIT_SQUARE))


@pytest.fixture
def two_region_document() -> dict[str, Any]:
    west = polygon_feature(
        [[10, 40], [20, 40], [20, 50], [10, 50], [10, 40]],
        **{"name": "West", "name:en": "West Region", "name:uk": "Захід"},
    )
    east = {
        "type": "Feature",
        "geometry": {
            "type": "MultiPolygon",
            "coordinates": [
                [[[20, 45], [30, 45], [30, 50], [20, 50], [20, 45]]],
                [[[25, 40], [30, 40], [30, 42], [25, 42], [25, 40]]],
            ],
        },
        "properties": {"name": "East"},
    }
    return feature_collection(west, east)
