"""SVG path data for polygon rings."""

from __future__ import annotations

from typing import Any, Mapping

from .geojson import RingSet, iter_ring_sets
from .models import GeoBounds
from .projection import project
from .util import format_number


def build_ring_set_path(
    ring_set: RingSet,
    bounds: GeoBounds,
    width: float,
    height: float,
    *,
    precision: int | None = None,
) -> str:
    """Return ``M x,y x,y ... Z`` for every ring, outer ring first."""
    tokens: list[str] = []
    for ring in ring_set:
        tokens.append("M")
        for point in ring:
            x, y = project(float(point[1]), float(point[0]), bounds, width, height)
            tokens.append(f"{format_number(x, precision)},{format_number(y, precision)}")
        tokens.append("Z")
    return " ".join(tokens)


def build_geometry_path(
    feature: Mapping[str, Any],
    bounds: GeoBounds,
    width: float,
    height: float,
    *,
    precision: int | None = None,
) -> str:
    """One compound path per feature; non-polygon geometries yield ``""``."""
    parts = [
        build_ring_set_path(ring_set, bounds, width, height, precision=precision)
        for ring_set in iter_ring_sets(feature)
    ]
    return " ".join(part for part in parts if part)
