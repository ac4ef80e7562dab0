"""GeoJSON document loading and geometry access helpers."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import requests

from .config import FetchConfig


_RETRYABLE_HTTP_STATUS = {429, 500, 502, 503, 504}
_URL_PREFIXES = ("http://", "https://")

GEOMETRY_POLYGON = "Polygon"
GEOMETRY_MULTIPOLYGON = "MultiPolygon"
NAME_PLACEHOLDER = "—"

_LOGGER = logging.getLogger("geosvgmap.geojson")

RingSet = Sequence[Sequence[Sequence[float]]]


class InvalidGeoJSONError(ValueError):
    """Raised when a geography source is not a usable feature collection."""


def is_url(source: Any) -> bool:
    return isinstance(source, str) and source.strip().lower().startswith(_URL_PREFIXES)


def load_geojson(
    source: str | Path | Mapping[str, Any],
    *,
    fetch_cfg: FetchConfig | None = None,
) -> Mapping[str, Any]:
    """Return a feature collection from a mapping, a file path, or an http(s) URL."""
    if isinstance(source, Mapping):
        document: Any = source
    elif is_url(source):
        fetcher = GeoJsonFetcher(fetch_cfg or FetchConfig())
        document = fetcher.fetch(str(source).strip())
    else:
        document = _read_geojson_file(Path(source))
    return ensure_feature_collection(document)


def ensure_feature_collection(document: Any) -> Mapping[str, Any]:
    if not document or not isinstance(document, Mapping):
        raise InvalidGeoJSONError("Invalid GeoJSON data.")
    features = document.get("features")
    if features is None:
        raise InvalidGeoJSONError("Invalid GeoJSON data: missing 'features'.")
    if not isinstance(features, list):
        raise InvalidGeoJSONError("Invalid GeoJSON data: 'features' must be a list.")
    return document


def iter_features(document: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
    for feature in document.get("features") or []:
        if isinstance(feature, Mapping):
            yield feature


def geometry_type(feature: Mapping[str, Any]) -> str | None:
    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        return None
    value = geometry.get("type")
    return value if isinstance(value, str) else None


def iter_ring_sets(feature: Mapping[str, Any]) -> list[RingSet]:
    """Normalize a feature geometry to a list of ring-sets.

    ``Polygon`` becomes a one-element list; ``MultiPolygon`` is already a list
    of ring-sets. Any other geometry yields no ring-sets.
    """
    kind = geometry_type(feature)
    if kind not in (GEOMETRY_POLYGON, GEOMETRY_MULTIPOLYGON):
        return []
    coordinates = feature["geometry"].get("coordinates") or []
    if kind == GEOMETRY_POLYGON:
        return [coordinates]
    return list(coordinates)


def resolve_region_name(properties: Mapping[str, Any] | None, language: str) -> str:
    """Localized name, then the plain ``name``, then a placeholder dash."""
    if not properties:
        return NAME_PLACEHOLDER
    localized = properties.get(f"name:{language}")
    if localized is not None:
        return str(localized)
    fallback = properties.get("name")
    if fallback is not None:
        return str(fallback)
    return NAME_PLACEHOLDER


def _read_geojson_file(path: Path) -> Any:
    if not path.exists():
        raise InvalidGeoJSONError(f"GeoJSON file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidGeoJSONError(f"Failed parsing GeoJSON file '{path}': {exc}") from exc


class GeoJsonFetcher:
    """Download GeoJSON documents over HTTP with bounded retries."""

    def __init__(self, cfg: FetchConfig) -> None:
        self.cfg = cfg
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": cfg.user_agent})
        self._max_retries = max(int(cfg.max_retries), 0)
        self._retry_backoff_s = max(float(cfg.retry_backoff_s), 0.01)

    def fetch(self, url: str) -> Any:
        try:
            response = self._request_get(url)
        except requests.RequestException as exc:
            raise InvalidGeoJSONError(f"Failed downloading GeoJSON from {url}: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidGeoJSONError(f"Response from {url} is not valid JSON") from exc

    def _request_get(self, url: str) -> requests.Response:
        attempts = self._max_retries + 1
        for attempt in range(attempts):
            response = self._session.get(url, timeout=self.cfg.request_timeout_s)
            if response.status_code not in _RETRYABLE_HTTP_STATUS:
                response.raise_for_status()
                return response
            if attempt >= self._max_retries:
                response.raise_for_status()
            delay_s = min(self._retry_backoff_s * (2**attempt), 60.0)
            _LOGGER.warning(
                "Retryable response %s for %s; retrying in %.1fs (%d/%d)",
                response.status_code,
                url,
                delay_s,
                attempt + 1,
                self._max_retries,
            )
            response.close()
            time.sleep(delay_s)
        raise RuntimeError("Unreachable retry loop in GeoJSON fetcher")
