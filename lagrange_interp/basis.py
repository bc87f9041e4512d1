"""
Lagrange basis polynomials.

Two independent strategies compute L_j:

* ``evaluate_basis_at`` multiplies the ratios (x - x_i) / (x_j - x_i)
  numerically at a single point;
* ``build_basis_polynomials`` expands each L_j into ascending coefficients
  by repeated multiplication with the monomials (x - x_i).

Repeated x-values are a caller error.  They are not detected here: the
divisions produce inf / nan which are returned unchanged.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .polynomial import FloatArray, as_polynomial, multiply

logger = logging.getLogger(__name__)


def _nodes(x_points: ArrayLike) -> FloatArray:
    return np.asarray(x_points, dtype=np.float64).reshape(-1)


def basis_ratio(x: float, x_j: float, x_i: float) -> np.float64:
    """Single factor (x - x_i) / (x_j - x_i) of L_j(x)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return (np.float64(x) - np.float64(x_i)) / (np.float64(x_j) - np.float64(x_i))


def evaluate_basis_at(j: int, x: float, x_points: ArrayLike) -> float:
    """Value of the j-th basis polynomial at *x*, as a direct product."""
    nodes = _nodes(x_points)
    if not 0 <= j < len(nodes):
        raise IndexError(f"basis index {j} out of range for {len(nodes)} nodes")

    value = np.float64(1.0)
    with np.errstate(invalid="ignore", over="ignore"):
        for i in range(len(nodes)):
            if i != j:
                value = value * basis_ratio(x, nodes[j], nodes[i])
    return float(value)


def evaluate_all_basis_at(x: float, x_points: ArrayLike) -> list[float]:
    """[L_0(x), ..., L_{n-1}(x)] in node order."""
    nodes = _nodes(x_points)
    return [evaluate_basis_at(j, x, nodes) for j in range(len(nodes))]


def build_basis_polynomial(j: int, x_points: ArrayLike) -> FloatArray:
    nodes = _nodes(x_points)
    if not 0 <= j < len(nodes):
        raise IndexError(f"basis index {j} out of range for {len(nodes)} nodes")

    poly = np.ones(1, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(len(nodes)):
            if i == j:
                continue
            poly = multiply(poly, [-nodes[i], 1.0])
            poly = poly / (nodes[j] - nodes[i])
    return as_polynomial(poly)


def build_basis_polynomials(x_points: ArrayLike) -> list[FloatArray]:
    """Coefficient vectors (ascending) of L_0 .. L_{n-1}, each of length n."""
    nodes = _nodes(x_points)
    basis = [build_basis_polynomial(j, nodes) for j in range(len(nodes))]
    if basis and not all(np.all(np.isfinite(p)) for p in basis):
        logger.debug("basis polynomials for %d nodes contain non-finite coefficients "
                     "(repeated x-values?)", len(nodes))
    return basis
