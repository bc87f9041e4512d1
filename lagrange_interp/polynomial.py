"""
Primitive operations on polynomials in ascending coefficient form.

A polynomial is a read-only 1-D float64 array ``c`` with ``c[i]`` the
coefficient of ``x**i``.  Trailing zeros are allowed and kept.

Evaluation uses Horner's scheme (numpy.polynomial.polynomial.polyval): one
multiply and one add per coefficient, so the rounding error of a degree-d
evaluation is bounded by roughly ``2*d*eps*sum(|c_i|*|x|**i)``.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np
from numpy.polynomial import polynomial as P
from numpy.typing import ArrayLike, NDArray

FloatArray = NDArray[np.floating[Any]]

ZERO_EPS: float = 1e-10      # |c| below this is not displayed
INTEGER_EPS: float = 1e-10   # |c - round(c)| below this prints as an integer
FORMAT_DECIMALS: int = 4


def as_polynomial(coefficients: ArrayLike) -> FloatArray:
    """Return a read-only float64 copy of *coefficients*."""
    poly = np.array(coefficients, dtype=np.float64, copy=True).reshape(-1)
    poly.flags.writeable = False
    return poly


def multiply(poly_a: ArrayLike, poly_b: ArrayLike) -> FloatArray:
    """Convolve two coefficient sequences; len(result) == len(a) + len(b) - 1."""
    a = np.asarray(poly_a, dtype=np.float64).reshape(-1)
    b = np.asarray(poly_b, dtype=np.float64).reshape(-1)
    if a.size == 0 or b.size == 0:
        raise ValueError("cannot multiply an empty coefficient sequence")
    # polymul trims trailing zeros; convolve keeps the full length.
    return as_polynomial(np.convolve(a, b))


def evaluate(poly: ArrayLike, x: Union[float, ArrayLike]) -> Union[float, FloatArray]:
    """Evaluate *poly* at *x* (scalar or array) with Horner's scheme."""
    c = np.asarray(poly, dtype=np.float64).reshape(-1)
    if c.size == 0:
        c = np.zeros(1, dtype=np.float64)
    if np.ndim(x) == 0:
        return float(P.polyval(float(x), c))  # type: ignore[arg-type]
    return np.asarray(P.polyval(np.asarray(x, dtype=np.float64), c), dtype=np.float64)


def _format_magnitude(value: float) -> str:
    """Text for a non-negative coefficient.

    Below 1 the value keeps FORMAT_DECIMALS significant digits, so small
    coefficients never collapse to "0"; from 1 up it keeps FORMAT_DECIMALS
    decimal places.
    """
    if not np.isfinite(value):
        return str(value)
    nearest = round(value)
    if abs(value - nearest) < INTEGER_EPS:
        return str(int(nearest))
    return np.format_float_positional(value, precision=FORMAT_DECIMALS, unique=False,
                                      fractional=value >= 1.0, trim="-")


def format_polynomial(poly: Sequence[float] | FloatArray) -> str:
    """Human readable form, highest degree first.

    >>> format_polynomial([0, 1, 0, 2])
    '2x^3 + x'
    >>> format_polynomial([1, -1])
    '-x + 1'
    """
    parts: list[str] = []
    coefficients = np.asarray(poly, dtype=np.float64).reshape(-1)

    for degree in range(len(coefficients) - 1, -1, -1):
        coef = float(coefficients[degree])
        if abs(coef) < ZERO_EPS:
            continue
        text = _format_magnitude(abs(coef))

        if parts:
            parts.append(" - " if coef < 0 else " + ")
        elif coef < 0:
            parts.append("-")

        if degree == 0 or text != "1":
            parts.append(text)

        if degree > 0:
            parts.append("x")
            if degree > 1:
                parts.append(f"^{degree}")

    return "".join(parts) or "0"


def format_number(value: float) -> str:
    """Shortest faithful text for *value*; integral floats lose their '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
