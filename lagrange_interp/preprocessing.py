"""Parsing and validation of raw user input before it reaches the core."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

import numpy as np

from .errors import InputValidationError
from .polynomial import FloatArray

logger = logging.getLogger(__name__)

MIN_DATA_POINTS: int = 5

# y = x^2 sampled at x = -2..2
SAMPLE_DATA: tuple[tuple[str, str], ...] = (
    ("-2", "4"),
    ("-1", "1"),
    ("0", "0"),
    ("1", "1"),
    ("2", "4"),
)


def parse_number(text: Optional[str]) -> Optional[float]:
    """Float value of *text*, or None when it is blank, malformed or not finite."""
    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_points(rows: Iterable[tuple[Optional[str], Optional[str]]],
                 min_points: int = MIN_DATA_POINTS) -> tuple[FloatArray, FloatArray]:
    """Keep the rows whose cells both parse; require *min_points* of them with distinct x."""
    xs: list[float] = []
    ys: list[float] = []
    for x_text, y_text in rows:
        x_val, y_val = parse_number(x_text), parse_number(y_text)
        if x_val is None or y_val is None:
            continue
        xs.append(x_val)
        ys.append(y_val)

    if len(xs) < min_points:
        raise InputValidationError(f"Please provide at least {min_points} valid data points")
    if len(set(xs)) != len(xs):
        raise InputValidationError("X values must be unique")

    logger.debug("accepted %d data points", len(xs))
    return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)


def parse_query_point(text: Optional[str]) -> float:
    value = parse_number(text)
    if value is None:
        raise InputValidationError("Please provide a valid interpolation point")
    return value


def plot_range(x_points: Iterable[float], margin_ratio: float = 0.2) -> tuple[float, float]:
    """Data x-range padded by *margin_ratio* of its width on both sides."""
    xs = np.asarray(list(x_points), dtype=np.float64)
    if xs.size == 0:
        raise InputValidationError("No data points to plot")
    x_lo, x_hi = float(np.min(xs)), float(np.max(xs))
    span = x_hi - x_lo
    if span <= 0:
        return x_lo - 1.0, x_hi + 1.0
    return x_lo - span * margin_ratio, x_hi + span * margin_ratio
