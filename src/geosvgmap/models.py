"""Domain models shared across rendering modules."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


MARKER_MODE_ICON = "icon"
MARKER_MODE_COUNT = "count"
MARKER_MODE_LABEL = "label"
MARKER_MODE_DOT = "dot"


def _optional_float(value: Any, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected numeric value for marker field '{field_name}'")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Expected numeric value for marker field '{field_name}'") from exc


def _optional_text(value: Any) -> str | None:
    if value is None or value is False:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


@dataclass(frozen=True, slots=True)
class GeoBounds:
    """Geographic bounding box over all outer rings of a document."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lng_span(self) -> float:
        return self.max_lng - self.min_lng

    @property
    def is_degenerate(self) -> bool:
        """True when either axis cannot be scaled onto the canvas."""
        for span in (self.lat_span, self.lng_span):
            if not math.isfinite(span) or span == 0:
                return True
        return False

    def to_dict(self) -> dict[str, float]:
        return {
            "min_lat": self.min_lat,
            "max_lat": self.max_lat,
            "min_lng": self.min_lng,
            "max_lng": self.max_lng,
        }


@dataclass(frozen=True, slots=True)
class Marker:
    """Point annotation drawn on top of the region shapes.

    ``None`` means a field is absent. ``count`` keeps zero as a present value,
    text fields are present only when non-empty.
    """

    lat: float | None = None
    lng: float | None = None
    type: str | None = None
    css_class: str | None = None
    icon: str | None = None
    count: int | float | str | None = None
    label: str | None = None
    name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Marker:
        count = data.get("count")
        if isinstance(count, bool):
            count = int(count)
        return cls(
            lat=_optional_float(data.get("lat"), "lat"),
            lng=_optional_float(data.get("lng"), "lng"),
            type=_optional_text(data.get("type")),
            css_class=_optional_text(data.get("class")),
            icon=_optional_text(data.get("icon")),
            count=count,
            label=_optional_text(data.get("label")),
            name=_optional_text(data.get("name")),
        )

    @property
    def has_position(self) -> bool:
        return self.lat is not None and self.lng is not None

    @property
    def mode(self) -> str:
        if self.icon:
            return MARKER_MODE_ICON
        if self.count is not None:
            return MARKER_MODE_COUNT
        if self.label:
            return MARKER_MODE_LABEL
        return MARKER_MODE_DOT
