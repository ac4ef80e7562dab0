"""Render GeoJSON regions and point markers into standalone SVG maps."""

from .bounds import compute_bounds
from .config import RenderConfig
from .geojson import InvalidGeoJSONError, load_geojson
from .models import GeoBounds, Marker
from .projection import project
from .render import GeoMapSvgGenerator, render_svg

__version__ = "0.1.0"

__all__ = [
    "GeoBounds",
    "GeoMapSvgGenerator",
    "InvalidGeoJSONError",
    "Marker",
    "RenderConfig",
    "compute_bounds",
    "load_geojson",
    "project",
    "render_svg",
]
