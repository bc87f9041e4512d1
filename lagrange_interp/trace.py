"""
Step-by-step derivation of an interpolated value.

The trace walks the samples in order and, for each one, the factors of
L_j in increasing i.  Basis values are accumulated with the same ratio
products as ``basis.evaluate_basis_at`` and terms are summed in the same
order as ``interpolation.interpolate_at``, so ``StepTrace.final_value``
is bit-for-bit identical to the headline result.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from .basis import basis_ratio
from .interpolation import check_samples
from .polynomial import format_number


def _operand(value: float) -> str:
    text = format_number(value)
    return f"({text})" if text.startswith("-") else text


def difference_label(left: float, right: float) -> str:
    """'(a - b)' with negative operands parenthesised, e.g. '(0.5 - (-1))'."""
    return f"({format_number(left)} - {_operand(right)})"


@dataclass(frozen=True, slots=True)
class TraceFactor:
    """One factor (x - x_i) / (x_j - x_i) of a basis polynomial."""
    index: int
    x_i: float
    numerator: float
    denominator: float
    numerator_label: str
    denominator_label: str


@dataclass(frozen=True, slots=True)
class TraceTerm:
    """Contribution y_j * L_j(x) of one sample.

    ``basis_value`` is the running product of the ratios (x - x_i) / (x_j - x_i),
    the same arithmetic as ``evaluate_basis_at``.  ``numerator_product`` and
    ``denominator_product`` are for display only; their quotient may differ
    from ``basis_value`` in the last bits.
    """
    sample_index: int
    x_j: float
    y_j: float
    factors: tuple[TraceFactor, ...]
    numerator_product: float
    denominator_product: float
    basis_value: float
    term_value: float


@dataclass(frozen=True, slots=True)
class StepTrace:
    x: float
    terms: tuple[TraceTerm, ...]
    final_value: float

    def __len__(self) -> int:
        return len(self.terms)


def build_trace(x: float, x_points: ArrayLike, y_points: ArrayLike) -> StepTrace:
    xs, ys = check_samples(x_points, y_points)
    query = float(x)
    terms: list[TraceTerm] = []
    total = 0.0

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for j in range(len(xs)):
            x_j = float(xs[j])
            numerator = np.float64(1.0)
            denominator = np.float64(1.0)
            basis = np.float64(1.0)
            factors: list[TraceFactor] = []
            for i in range(len(xs)):
                if i == j:
                    continue
                x_i = float(xs[i])
                num = np.float64(query) - np.float64(x_i)
                den = np.float64(x_j) - np.float64(x_i)
                numerator = numerator * num
                denominator = denominator * den
                basis = basis * basis_ratio(query, x_j, x_i)
                factors.append(TraceFactor(
                    index=i,
                    x_i=x_i,
                    numerator=float(num),
                    denominator=float(den),
                    numerator_label=difference_label(query, x_i),
                    denominator_label=difference_label(x_j, x_i),
                ))

            basis_value = float(basis)
            term_value = float(ys[j]) * basis_value
            total += term_value
            terms.append(TraceTerm(
                sample_index=j,
                x_j=x_j,
                y_j=float(ys[j]),
                factors=tuple(factors),
                numerator_product=float(numerator),
                denominator_product=float(denominator),
                basis_value=basis_value,
                term_value=term_value,
            ))

    return StepTrace(x=query, terms=tuple(terms), final_value=total)


def format_trace(trace: StepTrace, decimals: int = 6) -> str:
    """Plain-text rendering of *trace*, one block per term."""
    q = format_number(trace.x)
    lines: list[str] = [f"Lagrange interpolation at x = {q}", ""]

    for term in trace.terms:
        j = term.sample_index
        lines.append(f"Term {j + 1}: L_{j}(x) * y_{j}")
        lines.append(f"  Data point: (x_{j}, y_{j}) = "
                     f"({format_number(term.x_j)}, {format_number(term.y_j)})")
        product = " * ".join(f"{f.numerator_label}/{f.denominator_label}" for f in term.factors)
        lines.append(f"  L_{j}(x) = {product or '1'}")
        lines.append(f"  L_{j}({q}) = {term.basis_value:.{decimals}f}")
        lines.append(f"  Term value: y_{j} * L_{j}(x) = {format_number(term.y_j)} * "
                     f"{term.basis_value:.{decimals}f} = {term.term_value:.{decimals}f}")
        lines.append("")

    summands = " + ".join(f"{t.term_value:.{decimals}f}" for t in trace.terms)
    lines.append(f"P({q}) = {summands} = {trace.final_value:.{decimals}f}")
    return "\n".join(lines)
