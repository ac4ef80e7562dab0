"""Geographic bounding box over a feature collection."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .geojson import iter_features, iter_ring_sets
from .models import GeoBounds


def compute_bounds(document: Mapping[str, Any]) -> GeoBounds:
    """Scan the outer ring of every polygon once.

    Holes never widen the box. A document without polygon coordinates keeps
    the infinite starting values, which the projector treats as degenerate.
    """
    min_lat = min_lng = math.inf
    max_lat = max_lng = -math.inf
    for feature in iter_features(document):
        for ring_set in iter_ring_sets(feature):
            if not ring_set:
                continue
            for point in ring_set[0]:
                lng, lat = float(point[0]), float(point[1])
                min_lat = min(min_lat, lat)
                max_lat = max(max_lat, lat)
                min_lng = min(min_lng, lng)
                max_lng = max(max_lng, lng)
    return GeoBounds(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)
