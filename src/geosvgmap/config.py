"""Typed configuration loader for `geosvgmap.yaml`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, cast

import yaml


DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_LANGUAGE = "uk"


def _mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected mapping for '{field_name}'")
    return cast(Mapping[str, Any], value)


def _str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def _int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected integer for '{field_name}'")
    return value


def _float(value: Any, field_name: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ValueError(f"Expected float for '{field_name}'")


def _bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected bool for '{field_name}'")
    return value


def _source_from_cfg(value: Any, field_name: str, root_dir: Path) -> str:
    """Resolve a path relative to the config file; URLs pass through."""
    raw = _str(value, field_name)
    if raw.lower().startswith(("http://", "https://")):
        return raw
    p = Path(raw)
    return str(p if p.is_absolute() else root_dir / p)


def _path_from_cfg(value: Any, field_name: str, root_dir: Path) -> Path:
    p = Path(_str(value, field_name))
    return p if p.is_absolute() else root_dir / p


@dataclass(frozen=True, slots=True)
class RenderConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    show_tooltips: bool = True
    language: str = DEFAULT_LANGUAGE
    coordinate_precision: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("render.width and render.height must be positive integers")
        if self.coordinate_precision is not None and self.coordinate_precision < 0:
            raise ValueError("render.coordinate_precision must be >= 0")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> RenderConfig:
        precision_raw = raw.get("coordinate_precision")
        return cls(
            width=_int(raw.get("width", DEFAULT_WIDTH), "render.width"),
            height=_int(raw.get("height", DEFAULT_HEIGHT), "render.height"),
            show_tooltips=_bool(raw.get("show_tooltips", True), "render.show_tooltips"),
            language=_str(raw.get("language", DEFAULT_LANGUAGE), "render.language"),
            coordinate_precision=(
                None
                if precision_raw is None
                else _int(precision_raw, "render.coordinate_precision")
            ),
        )


@dataclass(frozen=True, slots=True)
class PathsConfig:
    geojson: str | None = None
    markers: Path | None = None
    output_svg: Path | None = None
    logs_dir: Path | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> PathsConfig:
        def _optional_path(key: str) -> Path | None:
            value = raw.get(key)
            return None if value is None else _path_from_cfg(value, f"paths.{key}", root_dir)

        geojson_raw = raw.get("geojson")
        return cls(
            geojson=(
                None if geojson_raw is None else _source_from_cfg(geojson_raw, "paths.geojson", root_dir)
            ),
            markers=_optional_path("markers"),
            output_svg=_optional_path("output_svg"),
            logs_dir=_optional_path("logs_dir"),
        )


@dataclass(frozen=True, slots=True)
class FetchConfig:
    user_agent: str = "geosvgmap/0.1 (GeoJSON to SVG renderer)"
    request_timeout_s: float = 30.0
    max_retries: int = 2
    retry_backoff_s: float = 1.0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> FetchConfig:
        defaults = cls()
        return cls(
            user_agent=_str(raw.get("user_agent", defaults.user_agent), "fetch.user_agent"),
            request_timeout_s=_float(
                raw.get("request_timeout_s", defaults.request_timeout_s), "fetch.request_timeout_s"
            ),
            max_retries=_int(raw.get("max_retries", defaults.max_retries), "fetch.max_retries"),
            retry_backoff_s=_float(
                raw.get("retry_backoff_s", defaults.retry_backoff_s), "fetch.retry_backoff_s"
            ),
        )


@dataclass(frozen=True, slots=True)
class AppConfig:
    source_path: Path | None = None
    render: RenderConfig = field(default_factory=RenderConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], source_path: Path) -> AppConfig:
        root_dir = source_path.parent.resolve()
        return cls(
            source_path=source_path.resolve(),
            render=RenderConfig.from_mapping(_mapping(raw.get("render"), "render")),
            paths=PathsConfig.from_mapping(_mapping(raw.get("paths"), "paths"), root_dir),
            fetch=FetchConfig.from_mapping(_mapping(raw.get("fetch"), "fetch")),
        )


def load_config(path: str | Path) -> AppConfig:
    """Load and validate the YAML config file into typed settings."""
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Top-level config must be a YAML mapping")
    return AppConfig.from_mapping(cast(Mapping[str, Any], raw), cfg_path)
