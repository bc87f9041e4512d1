"""Dense evenly-spaced samples of polynomials, for plotting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np
from numpy.typing import ArrayLike

from .basis import build_basis_polynomials
from .errors import InvalidSampleCountError
from .polynomial import FloatArray, evaluate

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT: int = 100


@dataclass(frozen=True, slots=True)
class SampledCurve:
    x: FloatArray
    y: FloatArray

    def __post_init__(self) -> None:
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y shapes differ: {self.x.shape} vs {self.y.shape}")

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for xv, yv in zip(self.x, self.y):
            yield float(xv), float(yv)

    def points(self) -> list[tuple[float, float]]:
        return list(self)


def sample_grid(x_min: float, x_max: float, count: int) -> FloatArray:
    """*count* evenly spaced values on [x_min, x_max], both ends included."""
    if int(count) != count or count < 2:
        raise InvalidSampleCountError(f"at least 2 sample points are required, got {count}")
    grid = np.linspace(float(x_min), float(x_max), int(count), dtype=np.float64)
    grid.flags.writeable = False
    return grid


def _curve_on(poly: ArrayLike, grid: FloatArray) -> SampledCurve:
    with np.errstate(invalid="ignore", over="ignore"):
        values = evaluate(poly, grid)
    values.flags.writeable = False
    return SampledCurve(x=grid, y=values)


def sample_polynomial(poly: ArrayLike, x_min: float, x_max: float,
                      count: int = DEFAULT_SAMPLE_COUNT) -> SampledCurve:
    return _curve_on(poly, sample_grid(x_min, x_max, count))


def sample_all_basis_polynomials(x_points: ArrayLike, x_min: float, x_max: float,
                                 count: int = DEFAULT_SAMPLE_COUNT) -> list[SampledCurve]:
    """One curve per basis polynomial L_j, in node order."""
    grid = sample_grid(x_min, x_max, count)
    curves = [_curve_on(p, grid) for p in build_basis_polynomials(x_points)]
    logger.debug("sampled %d basis polynomials at %d points", len(curves), len(grid))
    return curves
