import re

import numpy as np
import pytest

from lagrange_interp.interpolation import build_interpolating_polynomial
from lagrange_interp.polynomial import (
    as_polynomial,
    evaluate,
    format_number,
    format_polynomial,
    multiply,
)


class TestMultiply:

    def test_binomial_square(self):
        assert list(multiply([1, 1], [1, 1])) == [1.0, 2.0, 1.0]

    def test_keeps_full_length_with_trailing_zeros(self):
        result = multiply([1, 0], [2, 0, 0])
        assert len(result) == 4
        assert list(result) == [2.0, 0.0, 0.0, 0.0]

    def test_monomial_factors(self):
        # (x - 1)(x - 2) = x^2 - 3x + 2
        assert list(multiply([-1, 1], [-2, 1])) == [2.0, -3.0, 1.0]

    def test_commutative(self):
        a, b = [0.5, -1.25, 3.0], [2.0, 0.0, -1.0, 4.0]
        assert np.allclose(multiply(a, b), multiply(b, a))

    def test_does_not_mutate_inputs(self):
        a = np.array([1.0, 2.0])
        b = [3.0, 4.0]
        multiply(a, b)
        assert list(a) == [1.0, 2.0]
        assert b == [3.0, 4.0]

    def test_result_is_read_only(self):
        result = multiply([1, 1], [1, -1])
        with pytest.raises(ValueError):
            result[0] = 5.0

    def test_empty_operand_rejected(self):
        with pytest.raises(ValueError):
            multiply([], [1.0])


class TestEvaluate:

    def test_scalar(self):
        assert evaluate([1, 2, 3], 2.0) == 17.0
        assert isinstance(evaluate([1, 2, 3], 2.0), float)

    def test_constant(self):
        assert evaluate([7.5], 123.0) == 7.5

    def test_array(self):
        xs = np.array([0.0, 1.0, -1.0, 3.0])
        assert list(evaluate([0, 0, 1], xs)) == [0.0, 1.0, 1.0, 9.0]

    def test_empty_is_zero(self):
        assert evaluate([], 4.0) == 0.0

    def test_matches_power_sum(self):
        coef = [0.3, -1.7, 2.2, 0.05, -0.4]
        x = 1.37
        direct = sum(c * x ** i for i, c in enumerate(coef))
        assert evaluate(coef, x) == pytest.approx(direct, rel=1e-12)


class TestFormatPolynomial:

    @pytest.mark.parametrize("coefficients, expected", [
        ([0], "0"),
        ([], "0"),
        ([1, 1], "x + 1"),
        ([0, 0, 2], "2x^2"),
        ([-1], "-1"),
        ([0, 1, 0, 2], "2x^3 + x"),
        ([1, -1], "-x + 1"),
        ([-3, 0, -0.5], "-0.5x^2 - 3"),
        ([0.123456], "0.1235"),
        ([2.5, 0, 1], "x^2 + 2.5"),
        ([1], "1"),
        ([0, -1], "-x"),
        ([4, -2, 0, 1], "x^3 - 2x + 4"),
        ([0, 0.1], "0.1x"),
        ([0, 1e-5], "0.00001x"),
        ([0, 0.99996], "x"),
        ([0, -1.00004], "-x"),
        ([3, -2e-5, 0, 0, 1], "x^4 - 0.00002x + 3"),
        ([0.000123456], "0.0001235"),
        ([12.345678], "12.3457"),
    ])
    def test_examples(self, coefficients, expected):
        assert format_polynomial(coefficients) == expected

    def test_near_zero_coefficients_skipped(self):
        assert format_polynomial([1e-12, 1, -3e-11]) == "x"

    def test_near_integer_rounded(self):
        assert format_polynomial([2.99999999999999, 0, 1.00000000000002]) == "x^2 + 3"

    def test_no_double_sign(self):
        assert "+ -" not in format_polynomial([-1, -2, -3])
        assert format_polynomial([-1, -2, -3]) == "-3x^2 - 2x - 1"


def test_format_number():
    assert format_number(2.0) == "2"
    assert format_number(-1.0) == "-1"
    assert format_number(0.5) == "0.5"
    assert format_number(-0.0) == "0"


def test_as_polynomial_copies():
    source = [1.0, 2.0]
    poly = as_polynomial(source)
    source[0] = 9.0
    assert poly[0] == 1.0
    assert not poly.flags.writeable


def test_small_interpolated_coefficients_stay_visible():
    text = format_polynomial(build_interpolating_polynomial([0, 1, 2, 3, 4], [0, 1, 2, 3, 4.00024]))
    assert not re.search(r"(^|[ -])0x", text)
    assert text.startswith("0.00001x^4")
