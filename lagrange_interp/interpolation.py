from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .basis import build_basis_polynomials, evaluate_basis_at
from .errors import InvalidSampleCountError, LengthMismatchError
from .polynomial import FloatArray, as_polynomial

logger = logging.getLogger(__name__)


def check_samples(x_points: ArrayLike, y_points: ArrayLike) -> tuple[FloatArray, FloatArray]:
    """Coerce both coordinate sequences to float arrays of equal, non-zero length."""
    xs = np.asarray(x_points, dtype=np.float64).reshape(-1)
    ys = np.asarray(y_points, dtype=np.float64).reshape(-1)
    if len(xs) != len(ys):
        raise LengthMismatchError(len(xs), len(ys))
    if len(xs) == 0:
        raise InvalidSampleCountError("at least one sample is required for interpolation")
    return xs, ys


def interpolate_at(x: float, x_points: ArrayLike, y_points: ArrayLike) -> float:
    """P(x) = sum_j y_j * L_j(x), each L_j evaluated as a direct product."""
    xs, ys = check_samples(x_points, y_points)
    total = 0.0
    for j in range(len(xs)):
        total += float(ys[j]) * evaluate_basis_at(j, x, xs)
    return total


def build_interpolating_polynomial(x_points: ArrayLike, y_points: ArrayLike) -> FloatArray:
    """Ascending coefficients of the interpolating polynomial, length n.

    Leading coefficients are left in place even when they vanish
    (e.g. collinear samples give a degree-1 polynomial padded with zeros).
    """
    xs, ys = check_samples(x_points, y_points)
    coefficients = np.zeros(len(xs), dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        for y_j, basis_poly in zip(ys, build_basis_polynomials(xs)):
            coefficients[: len(basis_poly)] += y_j * basis_poly
    logger.debug("interpolated %d samples -> %s", len(xs), coefficients)
    return as_polynomial(coefficients)
