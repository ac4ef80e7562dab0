"""Linear equirectangular fit of geographic bounds onto the canvas."""

from __future__ import annotations

import math

from .models import GeoBounds


def _scale(offset: float, span: float, size: float) -> float:
    # zero or non-finite span pins the axis to the canvas origin
    if span == 0 or not math.isfinite(span):
        return 0.0
    return offset / span * size


def project(lat: float, lng: float, bounds: GeoBounds, width: float, height: float) -> tuple[float, float]:
    """Map (lat, lng) to (x, y) pixels.

    The bounding box is stretched to fill the canvas, so aspect ratio is not
    preserved. Screen y grows downward, hence ``max_lat - lat``.
    """
    x = _scale(lng - bounds.min_lng, bounds.lng_span, width)
    y = _scale(bounds.max_lat - lat, bounds.lat_span, height)
    return x, y
