"""CLI entrypoint for geosvgmap."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import math
from pathlib import Path
from typing import Sequence

from .bounds import compute_bounds
from .config import AppConfig, load_config
from .geojson import InvalidGeoJSONError, load_geojson
from .render import format_render_lines, run_render_map
from .util import setup_logging

LOGGER = logging.getLogger("geosvgmap.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geosvgmap",
        description="Render GeoJSON regions and point markers into a standalone SVG map.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--config", default=None, help="Path to YAML config.")
        p.add_argument("--geojson", default=None, help="GeoJSON file path or http(s) URL.")
        p.add_argument("--verbose", action="store_true", help="Enable debug logs.")

    render_p = subparsers.add_parser("render", help="Render the SVG map.")
    add_common(render_p)
    render_p.add_argument("--markers", default=None, help="YAML/JSON file with a list of markers.")
    render_p.add_argument(
        "--output",
        default=None,
        help="Output SVG path. Use '-' to write to stdout.",
    )
    render_p.add_argument("--width", type=int, default=None, help="Canvas width in pixels.")
    render_p.add_argument("--height", type=int, default=None, help="Canvas height in pixels.")
    render_p.add_argument("--language", default=None, help="Language code for region names.")
    render_p.add_argument(
        "--no-tooltips",
        action="store_true",
        help="Omit <title> tooltips on region shapes.",
    )

    bounds_p = subparsers.add_parser("bounds", help="Print the geographic bounds of a GeoJSON source.")
    add_common(bounds_p)

    return parser


def _load_and_setup(args: argparse.Namespace) -> AppConfig:
    cfg = load_config(args.config) if args.config else AppConfig()
    log_path = cfg.paths.logs_dir / "geosvgmap.log" if cfg.paths.logs_dir is not None else None
    setup_logging(log_path, verbose=args.verbose)
    return cfg


def _apply_render_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    changes: dict[str, object] = {}
    if args.width is not None:
        changes["width"] = args.width
    if args.height is not None:
        changes["height"] = args.height
    if args.language:
        changes["language"] = args.language
    if args.no_tooltips:
        changes["show_tooltips"] = False
    if not changes:
        return cfg
    return dataclasses.replace(cfg, render=dataclasses.replace(cfg.render, **changes))


def _run_render(cfg: AppConfig, args: argparse.Namespace) -> int:
    try:
        cfg = _apply_render_overrides(cfg, args)
    except ValueError as exc:
        LOGGER.error("Invalid render options: %s", exc)
        return 1
    report = run_render_map(
        cfg,
        geojson=args.geojson,
        markers_path=Path(args.markers) if args.markers else None,
        output_path=args.output,
    )
    for line in format_render_lines(report):
        LOGGER.info(line)
    return 0 if report.ok else 1


def _run_bounds(cfg: AppConfig, args: argparse.Namespace) -> int:
    source = args.geojson or cfg.paths.geojson
    if source is None:
        LOGGER.error("No GeoJSON source configured (paths.geojson or --geojson).")
        return 1
    try:
        document = load_geojson(source, fetch_cfg=cfg.fetch)
    except InvalidGeoJSONError as exc:
        LOGGER.error("%s", exc)
        return 1
    bounds = compute_bounds(document)
    if bounds.is_degenerate:
        LOGGER.warning("Bounds are degenerate on at least one axis.")
    # empty documents keep infinite extrema, which JSON cannot represent
    payload = {key: value if math.isfinite(value) else None for key, value in bounds.to_dict().items()}
    print(json.dumps(payload, indent=2, sort_keys=True, allow_nan=False))
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    cfg = _load_and_setup(args)
    command = str(args.command)
    if command == "render":
        return _run_render(cfg, args)
    if command == "bounds":
        return _run_bounds(cfg, args)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _dispatch(args)


if __name__ == "__main__":
    raise SystemExit(main())
