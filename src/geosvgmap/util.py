"""Utility helpers for logging, number formatting, and file output."""

from __future__ import annotations

import logging
import math
from pathlib import Path


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> None:
    """Configure root logging to console and optionally a file."""
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def write_text(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")


def format_number(value: float, precision: int | None = None) -> str:
    """Render a coordinate for SVG attributes.

    Integral values drop the fractional part (``50.0`` -> ``"50"``); other
    values use the shortest round-trip representation, optionally rounded to
    ``precision`` decimal places first.
    """
    number = float(value)
    if not math.isfinite(number):
        return repr(number)
    if precision is not None:
        number = round(number, precision)
    if number.is_integer():
        return str(int(number))
    return repr(number)
