"""SVG map assembly from GeoJSON regions and point markers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Any, Mapping, Sequence

from .bounds import compute_bounds
from .config import AppConfig, FetchConfig, RenderConfig
from .geojson import (
    GEOMETRY_MULTIPOLYGON,
    GEOMETRY_POLYGON,
    NAME_PLACEHOLDER,
    InvalidGeoJSONError,
    geometry_type,
    iter_features,
    load_geojson,
    resolve_region_name,
)
from .markers import coerce_markers, load_markers, render_marker
from .models import GeoBounds, Marker
from .paths import build_geometry_path
from .projection import project
from .util import write_text


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
STDOUT_TARGET = "-"

_LOGGER = logging.getLogger("geosvgmap.render")

MarkerInput = Marker | Mapping[str, Any]


def render_svg(
    document: Mapping[str, Any],
    bounds: GeoBounds,
    cfg: RenderConfig,
    markers: Sequence[MarkerInput] = (),
) -> str:
    """Assemble the complete SVG document; performs no I/O."""
    width, height = cfg.width, cfg.height
    parts = [f"<svg viewBox='0 0 {width} {height}' xmlns='{SVG_NAMESPACE}'>"]

    for feature in iter_features(document):
        name = resolve_region_name(feature.get("properties"), cfg.language)
        if name == NAME_PLACEHOLDER:
            _LOGGER.debug("Feature has no name for language %r; using placeholder", cfg.language)
        if geometry_type(feature) not in (GEOMETRY_POLYGON, GEOMETRY_MULTIPOLYGON):
            _LOGGER.debug("Feature '%s' has unsupported geometry %r", name, geometry_type(feature))
        path = build_geometry_path(
            feature, bounds, width, height, precision=cfg.coordinate_precision
        )
        tooltip = f"<title>{escape(name)}</title>" if cfg.show_tooltips else ""
        parts.append(f"<path class='region' d='{path}' fill-rule='evenodd'>{tooltip}</path>")

    for marker in coerce_markers(markers):
        markup = render_marker(marker, bounds, width, height, precision=cfg.coordinate_precision)
        if not markup:
            _LOGGER.debug("Skipping marker without lat/lng: %r", marker)
        parts.append(markup)

    parts.append("</svg>")
    return "".join(parts)


class GeoMapSvgGenerator:
    """Holds one geography, its bounds, and the current marker list.

    ``render(markers)`` with a non-empty list replaces the stored markers for
    this and later calls, so one instance must not be shared across threads.
    Use ``render_svg`` directly for a stateless call.
    """

    def __init__(
        self,
        geojson: str | Path | Mapping[str, Any],
        markers: Sequence[MarkerInput] | None = None,
        cfg: RenderConfig | None = None,
        *,
        fetch_cfg: FetchConfig | None = None,
    ) -> None:
        self.document = load_geojson(geojson, fetch_cfg=fetch_cfg)
        self.cfg = cfg or RenderConfig()
        self.markers = coerce_markers(markers)
        self.bounds = compute_bounds(self.document)
        if self.bounds.is_degenerate:
            _LOGGER.warning(
                "Degenerate geographic bounds %s; collapsed axes are pinned to 0.",
                self.bounds.to_dict(),
            )

    def lat_lng_to_svg(self, lat: float, lng: float) -> tuple[float, float]:
        return project(lat, lng, self.bounds, self.cfg.width, self.cfg.height)

    def render(self, markers: Sequence[MarkerInput] | None = None) -> str:
        if markers:
            self.markers = coerce_markers(markers)
        return render_svg(self.document, self.bounds, self.cfg, self.markers)


@dataclass(slots=True)
class RenderMapReport:
    output_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)
    svg: str | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_info(self, msg: str) -> None:
        self.infos.append(msg)


def run_render_map(
    cfg: AppConfig,
    *,
    geojson: str | Path | Mapping[str, Any] | None = None,
    markers_path: Path | None = None,
    output_path: Path | str | None = None,
) -> RenderMapReport:
    """Load inputs named by the config (or overrides), render, and write the SVG."""
    target = output_path if output_path is not None else cfg.paths.output_svg
    report = RenderMapReport(
        output_path=None if target is None or target == STDOUT_TARGET else Path(target)
    )

    source = geojson if geojson is not None else cfg.paths.geojson
    if source is None:
        report.add_error("No GeoJSON source configured (paths.geojson or --geojson).")
        return report

    markers_file = markers_path if markers_path is not None else cfg.paths.markers
    markers: list[Marker] = []
    if markers_file is not None:
        if not markers_file.exists():
            report.add_warning(f"Markers file not found: {markers_file}")
        else:
            try:
                markers = load_markers(markers_file)
            except ValueError as exc:
                report.add_error(f"Failed parsing markers file '{markers_file}': {exc}")
                return report
            report.add_info(f"Loaded {len(markers)} markers from {markers_file}")

    try:
        generator = GeoMapSvgGenerator(source, cfg=cfg.render, fetch_cfg=cfg.fetch)
    except InvalidGeoJSONError as exc:
        report.add_error(str(exc))
        return report

    svg = generator.render(markers)
    report.svg = svg
    report.summary = _summarize(generator.document, markers)
    report.add_info(
        "Render summary: "
        + ", ".join(f"{key}={value}" for key, value in report.summary.items())
    )

    if report.output_path is not None:
        write_text(report.output_path, svg)
        report.add_info(f"SVG map written to {report.output_path}")
    elif target == STDOUT_TARGET:
        sys.stdout.write(svg + "\n")
    else:
        report.add_warning("No output path configured; SVG was rendered but not written.")
    return report


def format_render_lines(report: RenderMapReport) -> Sequence[str]:
    lines: list[str] = []
    lines.extend(f"[INFO] {msg}" for msg in report.infos)
    lines.extend(f"[WARN] {msg}" for msg in report.warnings)
    lines.extend(f"[ERROR] {msg}" for msg in report.errors)
    if report.ok:
        lines.append("[OK] Map rendering completed with no errors.")
    return lines


def _summarize(document: Mapping[str, Any], markers: Sequence[Marker]) -> dict[str, int]:
    features = list(iter_features(document))
    with_path = sum(
        1 for f in features if geometry_type(f) in (GEOMETRY_POLYGON, GEOMETRY_MULTIPOLYGON)
    )
    placed = sum(1 for m in markers if m.has_position)
    return {
        "features_total": len(features),
        "regions_with_path": with_path,
        "features_skipped": len(features) - with_path,
        "markers_total": len(markers),
        "markers_rendered": placed,
        "markers_skipped": len(markers) - placed,
    }
