import math

import numpy as np
import pytest
import sympy as sp
from scipy.interpolate import lagrange as scipy_lagrange

from errors import DuplicateAbscissaError, InsufficientDataError, InvalidQueryError
from lagrange import LagrangeInterpolator
from points import PointSet


@pytest.fixture
def interpolator():
    return LagrangeInterpolator()


def test_squares_at_midpoint(squares, interpolator):
    assert interpolator.evaluate(squares, 1.5).estimate == pytest.approx(2.25)


def test_two_point_line(line, interpolator):
    assert interpolator.evaluate(line, 0.5).estimate == pytest.approx(0.5)


def test_uneven_and_unordered_points(interpolator):
    uneven = PointSet([(0, 0), (1, 1), (3, 9)])
    assert interpolator.evaluate(uneven, 2.0).estimate == pytest.approx(4.0)

    shuffled = PointSet([(2, 4), (0, 0), (3, 9), (1, 1)])
    assert interpolator.evaluate(shuffled, 1.5).estimate == pytest.approx(2.25)


def test_duplicate_abscissa(interpolator):
    with pytest.raises(DuplicateAbscissaError):
        interpolator.evaluate(PointSet([(0, 1), (0, 2)]), 0.5)

    with pytest.raises(DuplicateAbscissaError) as excinfo:
        interpolator.explain(PointSet([(0, 1), (1, 2), (0, 3)]))
    assert (excinfo.value.i, excinfo.value.j) == (0, 2)


def test_single_point_rejected(interpolator):
    with pytest.raises(InsufficientDataError):
        interpolator.evaluate([(0, 1)], 0.0)


def test_invalid_query_reported_before_points(interpolator):
    with pytest.raises(InvalidQueryError):
        interpolator.evaluate([(0, 1)], "abc")
    with pytest.raises(InvalidQueryError):
        interpolator.basis_values([(0, 1)], None)


def test_identity_at_sample_points(cubic, interpolator):
    for p in cubic:
        assert interpolator.evaluate(cubic, p.x).estimate == pytest.approx(p.y, abs=1e-9)


def test_matches_scipy_reference(interpolator):
    xs = np.array([0.0, 0.7, 1.5, 2.2, 3.9])
    ys = np.sin(xs)
    points = PointSet.from_arrays(xs, ys)
    reference = scipy_lagrange(xs, ys)
    for x in (0.2, 1.0, 3.0):
        assert interpolator.evaluate(points, x).estimate == pytest.approx(reference(x), abs=1e-8)


def test_basis_values_partition_unity(cubic, interpolator):
    values = interpolator.basis_values(cubic, 0.37)
    assert len(values) == len(cubic)
    assert math.fsum(values) == pytest.approx(1.0)

    at_node = interpolator.basis_values(cubic, cubic[2].x)
    assert at_node == pytest.approx([0, 0, 1, 0, 0, 0], abs=1e-12)


def test_equation_text(line, interpolator):
    result = interpolator.evaluate(line, 0.5)
    assert result.equation == (
        "f(x) = 0.00 * ((x - 1.00) / (0.00 - 1.00)) + 1.00 * ((x - 0.00) / (1.00 - 0.00))"
    )
    assert result.formula.substitution() == ""
    assert result.method == 'lagrange'


def test_equation_signs_follow_values(interpolator):
    points = PointSet([(-1, 2), (1, -3)])
    assert interpolator.explain(points).text() == (
        "f(x) = 2.00 * ((x - 1.00) / (-1.00 - 1.00)) - 3.00 * ((x + 1.00) / (1.00 + 1.00))"
    )


def test_rendered_equation_reproduces_estimate(interpolator):
    points = PointSet([(-2, 3), (0, 1), (1, -1), (4, 2)])
    result = interpolator.evaluate(points, 0.5)

    rhs = result.equation.split('=', 1)[1]
    value = float(sp.sympify(rhs).subs(sp.Symbol('x'), 0.5))
    assert value == pytest.approx(result.estimate, abs=1e-9)
    assert result.formula.evaluate(0.5) == pytest.approx(result.estimate, abs=1e-12)
