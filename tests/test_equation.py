import numpy as np
import pytest
import sympy as sp

from equation import Equation, Factor, Term, render_signed_terms
from newton_gregory import FORWARD, NewtonGregoryInterpolator
from points import PointSet


def test_factor_text():
    assert Factor('u').text() == "(u)"
    assert Factor('u', 2).text() == "(u - 2)"
    assert Factor('u', -2).text() == "(u + 2)"
    assert Factor('x', 0.0, denominator=(1.0, 0.0), precision=2).text() == \
        "((x - 0.00) / (1.00 - 0.00))"


def test_factor_latex():
    assert Factor('u', 1).latex() == r"\left(u - 1\right)"
    assert Factor('x', 2.5, denominator=(1.0, 2.5), precision=1).latex() == \
        r"\frac{x - 2.5}{1.0 - 2.5}"


def test_factor_evaluate():
    assert Factor('u', 3).evaluate(5) == 2
    assert Factor('x', 1.0, denominator=(3.0, 1.0)).evaluate(2.0) == pytest.approx(0.5)


def test_leading_term_has_no_plus():
    terms = [Term(1.5), Term(-2.25, (Factor('u'),), divisor=1), Term(0.5, (Factor('u'),))]
    assert render_signed_terms(terms) == "1.50 - 2.25(u) / 1 + 0.50(u)"


def test_negative_leading_term():
    assert render_signed_terms([Term(-1.0), Term(2.0)]) == "-1.00 + 2.00"


def test_precision_and_empty():
    assert render_signed_terms([Term(1 / 3)], precision=3) == "0.333"
    assert render_signed_terms([]) == "0.00"


def test_joiner():
    term = Term(2.0, (Factor('x', 1, precision=2), Factor('x', 2, precision=2)), joiner=' * ')
    assert term.text() == "2.00 * (x - 1.00) * (x - 2.00)"
    assert term.latex() == r"2.00 \cdot \left(x - 1.00\right) \cdot \left(x - 2.00\right)"


def test_latex_style():
    terms = [Term(1.0), Term(-2.0, (Factor('u'), Factor('u', 1)), divisor=2)]
    assert render_signed_terms(terms, style='latex') == \
        r"1.00 - \frac{2.00\left(u\right)\left(u - 1\right)}{2}"


def test_unknown_style():
    with pytest.raises(ValueError):
        render_signed_terms([Term(1.0)], style='html')


def test_term_value():
    term = Term(-3.0, (Factor('u'), Factor('u', 1)), divisor=2)
    assert term.value(3.0) == pytest.approx(-9.0)


def test_equation_normalization():
    equation = Equation((Term(1.0), Term(2.0, (Factor('u'),), divisor=1)),
                        variable='u', origin=10.0, step=0.5)
    assert equation.substitution() == "u = (x - 10) / 0.5"
    assert equation.normalize(11.0) == 2.0
    assert equation.evaluate(11.0) == pytest.approx(5.0)
    assert str(equation) == "f(x) = 1.00 + 2.00(u) / 1"


def test_expanded_polynomial(squares):
    equation = NewtonGregoryInterpolator(FORWARD).explain(squares)
    x = sp.Symbol('x')
    coeffs = [float(c) for c in sp.Poly(equation.expanded(), x).all_coeffs()]
    assert np.allclose(coeffs, [1.0, 0.0, 0.0])


def test_to_function_is_vectorised(squares):
    equation = NewtonGregoryInterpolator(FORWARD).explain(squares)
    f = equation.to_function()
    xs = np.linspace(0, 3, 7)
    assert np.allclose(f(xs), xs ** 2)


def test_to_function_constant_polynomial():
    equation = NewtonGregoryInterpolator(FORWARD).explain(PointSet([(0, 1), (1, 1)]))
    values = equation.to_function()(np.array([0.0, 0.5, 2.0]))
    assert values.shape == (3,)
    assert np.allclose(values, 1.0)
