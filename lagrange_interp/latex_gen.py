from __future__ import annotations

from typing import Sequence

import numpy as np
import sympy as sp
from numpy.typing import ArrayLike

from .polynomial import INTEGER_EPS, ZERO_EPS, format_number
from .trace import StepTrace

X = sp.Symbol("x")


class LaTeXGenerator:
    """Renders interpolation results as display-math LaTeX.

    Parameters
    ----------
    approx : bool
        When True (default) non-integral coefficients are rendered as
        rounded decimals with *decimals* digits after the point.
        When False, exact rational fractions are used.
    decimals : int
        Number of digits after the decimal point in approximate mode.
    """

    def __init__(self, approx: bool = True, decimals: int = 3) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))

    def reconfigure(self, approx: bool, decimals: int) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))

    def _n(self, v: float) -> sp.Expr:
        """Convert float to sympy number respecting approx mode.

        Integral values always become sp.Integer so that unit coefficients
        disappear from products (``1*x**2`` prints as ``x^{2}``).
        """
        v = float(v)
        if not np.isfinite(v):
            return sp.nan if np.isnan(v) else (sp.oo if v > 0 else -sp.oo)
        nearest = round(v)
        if abs(v - nearest) < INTEGER_EPS:
            return sp.Integer(int(nearest))
        if self.approx:
            return sp.Float(f"{v:.{self.decimals}f}")
        return sp.Rational(v).limit_denominator(1000)

    def _scale(self, v: float) -> sp.Expr:
        """Like _n, but a non-zero *v* never rounds to zero (falls back to significant digits)."""
        rounded = self._n(v)
        if rounded != 0 or v == 0 or not np.isfinite(v):
            return rounded
        return sp.Float(np.format_float_positional(
            float(v), precision=max(1, self.decimals), unique=False, fractional=False, trim="-"))

    def polynomial_expr(self, coefficients: ArrayLike) -> sp.Expr:
        expr: sp.Expr = sp.Integer(0)
        for k, c in enumerate(np.asarray(coefficients, dtype=np.float64).reshape(-1)):
            if abs(c) < ZERO_EPS:
                continue
            expr += self._n(c) * X ** k
        return expr

    def polynomial(self, coefficients: ArrayLike, name: str = "P") -> str:
        return f"$${name}(x) = {sp.latex(self.polynomial_expr(coefficients))}$$"

    def basis(self, j: int, x_points: Sequence[float]) -> str:
        """Product form of L_j: the factors (x - x_i) over the constant prod(x_j - x_i)."""
        nodes = [float(v) for v in x_points]
        if not 0 <= j < len(nodes):
            raise IndexError(f"basis index {j} out of range for {len(nodes)} nodes")
        numer: sp.Expr = sp.Integer(1)
        denom = 1.0
        for i, x_i in enumerate(nodes):
            if i == j:
                continue
            numer *= X - self._n(x_i)
            denom *= nodes[j] - x_i
        return f"$$L_{{{j}}}(x) = {sp.latex(numer / self._scale(denom))}$$"

    def trace(self, step_trace: StepTrace) -> str:
        fmt = f"{{:.{self.decimals}f}}"
        summands = " + ".join(fmt.format(t.term_value) for t in step_trace.terms)
        q = format_number(step_trace.x)
        return f"$$P({q}) = {summands} = {fmt.format(step_trace.final_value)}$$"
