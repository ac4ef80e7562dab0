"""Marker loading and SVG markup for point annotations."""

from __future__ import annotations

import re
from html import escape
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from .models import (
    MARKER_MODE_COUNT,
    MARKER_MODE_ICON,
    MARKER_MODE_LABEL,
    GeoBounds,
    Marker,
)
from .projection import project
from .util import format_number


_TYPE_CLASS_RE = re.compile(r"[^A-Za-z0-9\-_]")
_BASE_CLASS = "marker"
_COUNT_RADIUS = 7
_DOT_RADIUS = 6
_COUNT_LABEL_OFFSET_Y = 3


def load_markers(path: Path) -> list[Marker]:
    """Load a YAML (or JSON) list of marker mappings."""
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Failed parsing markers file '{path}': {exc}") from exc
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Expected list of markers in {path}")

    markers: list[Marker] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise ValueError(f"Expected mapping at index {idx} in {path}")
        markers.append(Marker.from_mapping(item))
    return markers


def coerce_markers(markers: Sequence[Marker | Mapping[str, Any]] | None) -> tuple[Marker, ...]:
    if not markers:
        return ()
    return tuple(m if isinstance(m, Marker) else Marker.from_mapping(m) for m in markers)


def marker_classes(marker: Marker) -> str:
    classes = [_BASE_CLASS]
    if marker.type:
        sanitized = _TYPE_CLASS_RE.sub("", marker.type)
        if sanitized:
            classes.append(sanitized)
    # caller-trusted: inserted as-is
    if marker.css_class:
        classes.append(marker.css_class)
    return " ".join(dict.fromkeys(classes))


def render_marker(
    marker: Marker | Mapping[str, Any],
    bounds: GeoBounds,
    width: float,
    height: float,
    *,
    precision: int | None = None,
) -> str:
    """Return the SVG markup for one marker, or ``""`` without a position."""
    if not isinstance(marker, Marker):
        marker = Marker.from_mapping(marker)
    if marker.lat is None or marker.lng is None:
        return ""

    x, y = project(marker.lat, marker.lng, bounds, width, height)
    sx = format_number(x, precision)
    sy = format_number(y, precision)
    class_attr = marker_classes(marker)
    title = escape(marker.name or "")
    mode = marker.mode

    if mode == MARKER_MODE_ICON:
        icon = escape(marker.icon or "")
        return (
            f'<text x="{sx}" y="{sy}" class="{class_attr} icon" text-anchor="middle" '
            f'dominant-baseline="central">{icon}<title>{title}</title></text>'
        )
    if mode == MARKER_MODE_COUNT:
        label_y = format_number(y + _COUNT_LABEL_OFFSET_Y, precision)
        return (
            f'<circle cx="{sx}" cy="{sy}" r="{_COUNT_RADIUS}" class="{class_attr}">'
            f"<title>{title}</title></circle>"
            f'<text x="{sx}" y="{label_y}" class="label">{escape(_format_count(marker.count))}</text>'
        )
    if mode == MARKER_MODE_LABEL:
        label = escape(marker.label or "")
        return (
            f'<text x="{sx}" y="{sy}" class="{class_attr}" text-anchor="middle" '
            f'dominant-baseline="central">{label}<title>{title}</title></text>'
        )
    return f'<circle class="{class_attr}" cx="{sx}" cy="{sy}" r="{_DOT_RADIUS}" data-name="{title}"></circle>'


def _format_count(value: Any) -> str:
    if isinstance(value, float):
        return format_number(value)
    return str(value)
