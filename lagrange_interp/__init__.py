"""Lagrange polynomial interpolation: coefficients, evaluation, sampling and step traces."""

from .basis import build_basis_polynomials, evaluate_all_basis_at, evaluate_basis_at
from .errors import (
    InputValidationError,
    InterpolationError,
    InvalidSampleCountError,
    LengthMismatchError,
)
from .interpolation import build_interpolating_polynomial, interpolate_at
from .polynomial import evaluate, format_polynomial, multiply
from .sampling import SampledCurve, sample_all_basis_polynomials, sample_polynomial
from .trace import StepTrace, TraceFactor, TraceTerm, build_trace, format_trace

__all__ = [
    "InputValidationError",
    "InterpolationError",
    "InvalidSampleCountError",
    "LengthMismatchError",
    "SampledCurve",
    "StepTrace",
    "TraceFactor",
    "TraceTerm",
    "build_basis_polynomials",
    "build_interpolating_polynomial",
    "build_trace",
    "evaluate",
    "evaluate_all_basis_at",
    "evaluate_basis_at",
    "format_polynomial",
    "format_trace",
    "interpolate_at",
    "multiply",
    "sample_all_basis_polynomials",
    "sample_polynomial",
]
