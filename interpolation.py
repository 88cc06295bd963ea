"""
Interpolation Lab - Method Dispatch

Single entry point used by the UI: pick a method by name, evaluate, compare.

Methods:
    newton-forward   Newton-Gregory forward differences
    newton-backward  Newton-Gregory backward differences
    lagrange         Lagrange polynomial
"""

import logging

import numpy as np
import pandas as pd

from config import EQUATION_PRECISION, METHOD_LABELS, PLOT_SAMPLES
from errors import InterpolationError
from lagrange import LagrangeInterpolator
from newton_gregory import BACKWARD, FORWARD, NewtonGregoryInterpolator
from points import PointSet, parse_query

logger = logging.getLogger(__name__)

METHODS = tuple(METHOD_LABELS)


def get_interpolator(method, precision=EQUATION_PRECISION, check_spacing=True):
    """Interpolator instance for a method name."""
    if method == 'newton-forward':
        return NewtonGregoryInterpolator(FORWARD, check_spacing=check_spacing, precision=precision)
    elif method == 'newton-backward':
        return NewtonGregoryInterpolator(BACKWARD, check_spacing=check_spacing, precision=precision)
    elif method == 'lagrange':
        return LagrangeInterpolator(precision=precision)
    else:
        raise ValueError(f"Unknown interpolation method: {method}")


def interpolate(points, query_x, method='newton-forward', precision=EQUATION_PRECISION,
                check_spacing=True):
    """
    Estimate f(query_x) from ``points`` with the chosen method.

    The query is validated before any computation; a failure raises one of
    the ``InterpolationError`` subclasses and no partial result is returned.
    """
    interpolator = get_interpolator(method, precision=precision, check_spacing=check_spacing)
    x = parse_query(query_x)
    points = PointSet.coerce(points)
    return interpolator.evaluate(points, x)


def explain(points, method='newton-forward', precision=EQUATION_PRECISION, check_spacing=True):
    """Equation of the interpolating polynomial for ``method``."""
    interpolator = get_interpolator(method, precision=precision, check_spacing=check_spacing)
    return interpolator.explain(PointSet.coerce(points))


def compare_methods(points, query_x, methods=METHODS, precision=EQUATION_PRECISION,
                    check_spacing=True):
    """
    Run every method on the same input.

    Returns a DataFrame with one row per method: ``Method``, ``Estimate``
    (NaN when the method cannot be applied) and ``Error`` (the reason).
    Invalid points or query still raise, since no method could run.
    """
    x = parse_query(query_x)
    points = PointSet.coerce(points)

    rows = []
    for method in methods:
        try:
            result = interpolate(points, x, method, precision=precision,
                                 check_spacing=check_spacing)
            rows.append({
                'Method': METHOD_LABELS[method],
                'Estimate': result.estimate,
                'Equation': result.equation,
                'Error': '',
            })
        except InterpolationError as e:
            logger.info(f"{method} not applicable: {e}")
            rows.append({
                'Method': METHOD_LABELS[method],
                'Estimate': np.nan,
                'Equation': '',
                'Error': str(e),
            })

    return pd.DataFrame(rows, columns=['Method', 'Estimate', 'Equation', 'Error'])


def sample_curve(points, method='newton-forward', num=PLOT_SAMPLES, padding=0.0,
                 check_spacing=True):
    """
    Interpolating polynomial sampled on ``num`` points across the data range.

    ``padding`` extends the range on both sides as a fraction of its width.
    Returns (xs, ys) numpy arrays.
    """
    points = PointSet.coerce(points)
    formula = explain(points, method, check_spacing=check_spacing)

    xs = points.xs
    lo, hi = float(np.min(xs)), float(np.max(xs))
    margin = (hi - lo) * padding
    x_plot = np.linspace(lo - margin, hi + margin, num)
    return x_plot, formula.to_function()(x_plot)
