"""
Interpolation Lab - Lagrange Interpolation

    f(x) = sum_i y_i * L_i(x),   L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)

O(n^2) per evaluation, which is fine for hand-entered point sets.
"""

import logging

from config import EQUATION_PRECISION, FACTOR_PRECISION
from equation import Equation, Factor, Term
from errors import DuplicateAbscissaError
from points import PointSet, parse_query
from results import InterpolationResult

logger = logging.getLogger(__name__)


class LagrangeInterpolator:
    method = 'lagrange'

    def __init__(self, precision=EQUATION_PRECISION, factor_precision=FACTOR_PRECISION):
        self.precision = precision
        self.factor_precision = factor_precision

    def _basis(self, points):
        """
        (x_i, y_i, [x_j for j != i]) for every i, in evaluation order.

        Raises DuplicateAbscissaError on the first pair with x_i == x_j.
        """
        basis = []
        for i, (xi, yi) in enumerate(points):
            others = []
            for j, (xj, _) in enumerate(points):
                if i == j:
                    continue
                if xi == xj:
                    logger.warning(f"Lagrange rejected: x[{i}] == x[{j}] == {xi}")
                    raise DuplicateAbscissaError(min(i, j), max(i, j), xi)
                others.append(xj)
            basis.append((xi, yi, others))
        return basis

    def _equation(self, basis):
        terms = []
        for xi, yi, others in basis:
            factors = tuple(
                Factor('x', xj, denominator=(xi, xj), precision=self.factor_precision)
                for xj in others
            )
            terms.append(Term(yi, factors, joiner=' * '))
        return Equation(tuple(terms), precision=self.precision)

    def explain(self, points):
        points = PointSet.coerce(points)
        return self._equation(self._basis(points))

    def evaluate(self, points, query_x):
        x = parse_query(query_x)
        points = PointSet.coerce(points)
        basis = self._basis(points)

        estimate = 0.0
        for xi, yi, others in basis:
            term = yi
            for xj in others:
                term *= (x - xj) / (xi - xj)
            estimate += term

        formula = self._equation(basis)
        logger.debug(f"Lagrange: n={len(points)}, x={x:g}, f={estimate:g}")
        return InterpolationResult(
            estimate=float(estimate),
            equation=formula.text(),
            formula=formula,
            method=self.method,
        )

    def basis_values(self, points, query_x):
        """L_i(query_x) for every sample point (they sum to 1)."""
        x = parse_query(query_x)
        points = PointSet.coerce(points)
        values = []
        for xi, _, others in self._basis(points):
            value = 1.0
            for xj in others:
                value *= (x - xj) / (xi - xj)
            values.append(value)
        return values
