import numpy as np
import pytest
from scipy.interpolate import BarycentricInterpolator, lagrange

from lagrange_interp.errors import (
    InterpolationError,
    InvalidSampleCountError,
    LengthMismatchError,
)
from lagrange_interp.interpolation import build_interpolating_polynomial, interpolate_at
from lagrange_interp.polynomial import evaluate, format_polynomial

from conftest import random_samples


class TestParabola:

    def test_coefficients(self, parabola):
        xs, ys = parabola
        coefficients = build_interpolating_polynomial(xs, ys)
        assert len(coefficients) == 5
        assert list(coefficients) == pytest.approx([0.0, 0.0, 1.0, 0.0, 0.0], abs=1e-9)

    def test_point_value(self, parabola):
        xs, ys = parabola
        assert interpolate_at(0.5, xs, ys) == pytest.approx(0.25, abs=1e-12)

    def test_formatted(self, parabola):
        assert format_polynomial(build_interpolating_polynomial(*parabola)) == "x^2"


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_polynomial_reproduces_every_sample(seed, n):
    xs, ys = random_samples(seed, n)
    coefficients = build_interpolating_polynomial(xs, ys)
    assert len(coefficients) == n
    for x_k, y_k in zip(xs, ys):
        assert evaluate(coefficients, x_k) == pytest.approx(y_k, rel=1e-9, abs=1e-9)
        assert interpolate_at(x_k, xs, ys) == pytest.approx(y_k, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("seed", range(4))
def test_matches_scipy(seed):
    xs, ys = random_samples(seed, 6)
    reference = lagrange(xs, ys)
    barycentric = BarycentricInterpolator(xs, ys)
    coefficients = build_interpolating_polynomial(xs, ys)
    for x in np.linspace(-3.5, 3.5, 15):
        expected = float(barycentric(x))
        assert interpolate_at(float(x), xs, ys) == pytest.approx(expected, rel=1e-8, abs=1e-8)
        assert evaluate(coefficients, float(x)) == pytest.approx(expected, rel=1e-8, abs=1e-8)
        assert float(reference(x)) == pytest.approx(expected, rel=1e-6, abs=1e-6)


def test_collinear_points_give_line():
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    ys = [2.0 * x + 1.0 for x in xs]
    coefficients = build_interpolating_polynomial(xs, ys)
    assert len(coefficients) == 5
    assert list(coefficients[2:]) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    for x in (-3.0, 0.5, 10.0):
        assert evaluate(coefficients, x) == pytest.approx(2.0 * x + 1.0, rel=1e-9, abs=1e-9)
    assert format_polynomial(coefficients) == "2x + 1"


def test_unsorted_nodes():
    xs = [2.0, -1.0, 0.5, -2.0]
    ys = [x ** 3 for x in xs]
    coefficients = build_interpolating_polynomial(xs, ys)
    assert list(coefficients) == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)


def test_length_mismatch():
    with pytest.raises(LengthMismatchError) as excinfo:
        build_interpolating_polynomial([0, 1, 2, 3, 4], [0, 1, 2, 3])
    assert excinfo.value.n_x == 5
    assert excinfo.value.n_y == 4
    with pytest.raises(LengthMismatchError):
        interpolate_at(0.5, [0, 1, 2, 3, 4], [0, 1, 2, 3])


def test_errors_are_value_errors():
    assert issubclass(LengthMismatchError, InterpolationError)
    assert issubclass(InterpolationError, ValueError)


def test_empty_input():
    with pytest.raises(InvalidSampleCountError):
        build_interpolating_polynomial([], [])
    with pytest.raises(InvalidSampleCountError):
        interpolate_at(1.0, [], [])


def test_inputs_not_mutated():
    xs = np.array([0.0, 1.0, 3.0])
    ys = np.array([1.0, -1.0, 2.0])
    build_interpolating_polynomial(xs, ys)
    interpolate_at(2.0, xs, ys)
    assert list(xs) == [0.0, 1.0, 3.0]
    assert list(ys) == [1.0, -1.0, 2.0]


def test_duplicate_x_propagates_non_finite():
    xs = [0.0, 1.0, 1.0]
    ys = [1.0, 2.0, 3.0]
    assert not np.isfinite(interpolate_at(0.5, xs, ys))
    assert not np.all(np.isfinite(build_interpolating_polynomial(xs, ys)))
