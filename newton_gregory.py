"""
Interpolation Lab - Newton-Gregory Interpolation

Forward and backward difference formulas for equally spaced points.

Forward (u = (x - x_0) / h):
    f(x) = y_0 + sum_k Δ^k y[0] * u(u - 1)...(u - k + 1) / k!

Backward (u = (x - x_{n-1}) / h):
    f(x) = y_{n-1} + sum_k Δ^k y[n-1-k] * u(u + 1)...(u + k - 1) / k!

Evaluation and equation rendering both walk the same series produced by
``_series``, so the printed formula always matches the computed number.
"""

import logging
import math

from config import EQUATION_PRECISION, SPACING_ATOL, SPACING_RTOL
from difference_table import DifferenceTable
from equation import Equation, Factor, Term
from errors import DegenerateSpacingError, NonUniformSpacingError
from points import PointSet, parse_query
from results import InterpolationResult

logger = logging.getLogger(__name__)

FORWARD = 'forward'
BACKWARD = 'backward'
DIRECTIONS = (FORWARD, BACKWARD)


def _check_direction(direction):
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown Newton-Gregory direction: {direction}")
    return direction


class NewtonGregoryInterpolator:
    """
    Newton-Gregory interpolation over a PointSet.

    Parameters:
    -----------
    direction : str
        Default direction, ``'forward'`` or ``'backward'``.
    check_spacing : bool
        Reject point sets whose steps are not all equal to h. When False the
        formula is applied anyway and only a warning is logged.
    precision : int
        Decimals of the rendered coefficients.
    """

    def __init__(self, direction=FORWARD, check_spacing=True,
                 precision=EQUATION_PRECISION, rtol=SPACING_RTOL, atol=SPACING_ATOL):
        self.direction = _check_direction(direction)
        self.check_spacing = check_spacing
        self.precision = precision
        self.rtol = rtol
        self.atol = atol

    def step_size(self, points):
        """Validated step h = x[1] - x[0]."""
        points = PointSet.coerce(points)
        h = points.spacing()
        if h == 0:
            logger.warning(f"Newton-Gregory rejected: x[0] == x[1] == {points[0].x}")
            raise DegenerateSpacingError(points[0].x)

        index = points.first_irregular_step(self.rtol, self.atol)
        if index is not None:
            step = float(points.steps()[index])
            if self.check_spacing:
                logger.warning(f"Newton-Gregory rejected: step {index} is {step:g}, h = {h:g}")
                raise NonUniformSpacingError(index, step, h)
            logger.warning(f"Unequal spacing at step {index} ({step:g} != {h:g}); result may be wrong")
        return h

    def _series(self, points, direction):
        """
        Reference point and terms of the series.

        Returns (origin_x, base_y, [(k, delta, shifts), ...]) where each term
        is delta * prod(u - s for s in shifts) / k!.
        """
        table = DifferenceTable.build(points)
        n = len(points)
        series = []
        if direction == FORWARD:
            origin, base = points[0]
            for k in range(1, n):
                series.append((k, table.leading(k), tuple(range(k))))
        else:
            origin, base = points[n - 1]
            for k in range(1, n):
                series.append((k, table.trailing(k), tuple(-j for j in range(k))))
        return origin, base, series

    def _equation(self, origin, h, base, series):
        terms = [Term(base)]
        for k, delta, shifts in series:
            factors = tuple(Factor('u', s) for s in shifts)
            terms.append(Term(delta, factors, divisor=math.factorial(k)))
        return Equation(tuple(terms), variable='u', origin=origin, step=h,
                        precision=self.precision)

    def explain(self, points, direction=None):
        """Equation of the interpolating polynomial, independent of any query."""
        points = PointSet.coerce(points)
        direction = _check_direction(direction or self.direction)
        h = self.step_size(points)
        origin, base, series = self._series(points, direction)
        return self._equation(origin, h, base, series)

    def evaluate(self, points, query_x, direction=None):
        """Estimate f(query_x) and return it with the equation used."""
        x = parse_query(query_x)
        points = PointSet.coerce(points)
        direction = _check_direction(direction or self.direction)
        h = self.step_size(points)
        origin, base, series = self._series(points, direction)

        u = (x - origin) / h
        estimate = base
        for k, delta, shifts in series:
            term = delta
            for s in shifts:
                term *= (u - s)
            term /= math.factorial(k)
            estimate += term

        formula = self._equation(origin, h, base, series)
        logger.debug(f"Newton-Gregory {direction}: n={len(points)}, h={h:g}, u={u:g}, f={estimate:g}")
        return InterpolationResult(
            estimate=float(estimate),
            equation=formula.text(),
            formula=formula,
            method=f"newton-{direction}",
        )
