import pytest
import sympy as sp

from lagrange_interp.interpolation import build_interpolating_polynomial
from lagrange_interp.latex_gen import LaTeXGenerator
from lagrange_interp.trace import build_trace


@pytest.fixture
def gen():
    return LaTeXGenerator()


def test_parabola(gen, parabola):
    coefficients = build_interpolating_polynomial(*parabola)
    assert gen.polynomial(coefficients) == "$$P(x) = x^{2}$$"


def test_line(gen):
    assert gen.polynomial([1, 1]) == "$$P(x) = x + 1$$"


def test_zero(gen):
    assert gen.polynomial([0, 0]) == "$$P(x) = 0$$"


def test_approx_decimals():
    expr = LaTeXGenerator(approx=True, decimals=2).polynomial_expr([1 / 3, 0, 2])
    assert expr.coeff(sp.Symbol("x"), 0) == sp.Float("0.33")
    assert expr.coeff(sp.Symbol("x"), 2) == 2


def test_exact_mode():
    gen = LaTeXGenerator(approx=False)
    assert gen.polynomial_expr([0.5, 0.25]) == sp.Rational(1, 2) + sp.Rational(1, 4) * sp.Symbol("x")
    assert r"\frac{1}{2}" in gen.polynomial([0.5])


def test_reconfigure_clamps():
    gen = LaTeXGenerator()
    gen.reconfigure(approx=False, decimals=42)
    assert gen.approx is False
    assert gen.decimals == 10


def test_basis_product_form(gen):
    latex = gen.basis(0, [0.0, 1.0, 2.0])
    assert latex.startswith("$$L_{0}(x) = ")
    x = sp.Symbol("x")
    body = sp.parse_expr("(x - 1)*(x - 2)/2")
    assert sp.latex(body) in latex
    assert sp.expand(body).subs(x, 0) == 1


def test_basis_index_checked(gen):
    with pytest.raises(IndexError):
        gen.basis(3, [0.0, 1.0, 2.0])


def test_trace(gen, parabola):
    latex = gen.trace(build_trace(0.5, *parabola))
    assert latex.startswith("$$P(0.5) = ")
    assert latex.endswith("= 0.250$$")


@pytest.mark.parametrize("approx", [True, False])
def test_basis_with_closely_spaced_nodes(approx):
    latex = LaTeXGenerator(approx=approx).basis(0, [0.1001, 0.1004, 1.0])
    assert r"\infty" not in latex
    assert "nan" not in latex
    assert latex.startswith("$$L_{0}(x) = ")
