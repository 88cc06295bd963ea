"""
Interpolation Lab - Sample Points

Point and PointSet value types plus number parsing for user input.
A PointSet is never modified in place: every edit returns a new one.
"""

import logging
import math
from typing import NamedTuple

import numpy as np
import pandas as pd
import sympy as sp

from config import SPACING_ATOL, SPACING_RTOL
from errors import InsufficientDataError, InvalidPointError, InvalidQueryError

logger = logging.getLogger(__name__)

MIN_POINTS = 2


class Point(NamedTuple):
    x: float
    y: float


def parse_number(value):
    """
    Convert user input to a finite float.

    Accepts plain numbers and simple constant expressions such as
    ``1/3``, ``-pi`` or ``sqrt(2)``.
    """
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError as e:
            raise InvalidQueryError(value) from e
    else:
        text = str(value).strip() if value is not None else ''
        if not text:
            raise InvalidQueryError(value)
        try:
            number = float(sp.sympify(text))
        except (sp.SympifyError, TypeError, ValueError, OverflowError, SyntaxError) as e:
            logger.debug(f"Rejected numeric input {value!r}: {e}")
            raise InvalidQueryError(value) from e

    if not math.isfinite(number):
        raise InvalidQueryError(value)
    return number


def parse_query(value):
    """Parse the interpolation point entered by the user."""
    return parse_number(value)


def _coordinate(value, index, field):
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidPointError(index, field, value) from e
    if not math.isfinite(number):
        raise InvalidPointError(index, field, value)
    return number


class PointSet:
    """Ordered, validated collection of at least two (x, y) samples."""

    __slots__ = ('_points',)

    def __init__(self, points):
        validated = []
        for index, point in enumerate(points):
            try:
                x, y = point
            except (TypeError, ValueError) as e:
                raise InvalidPointError(index, 'point', point) from e
            validated.append(Point(_coordinate(x, index, 'x'), _coordinate(y, index, 'y')))

        if len(validated) < MIN_POINTS:
            raise InsufficientDataError(len(validated), MIN_POINTS)

        self._points = tuple(validated)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def coerce(cls, points):
        """Return ``points`` unchanged if already a PointSet, else build one."""
        if isinstance(points, cls):
            return points
        return cls(points)

    @classmethod
    def from_arrays(cls, xs, ys):
        xs = np.asarray(xs, dtype=float).ravel()
        ys = np.asarray(ys, dtype=float).ravel()
        if len(xs) != len(ys):
            raise ValueError(f"x and y must have the same length ({len(xs)} != {len(ys)})")
        return cls(zip(xs, ys))

    @classmethod
    def from_frame(cls, df):
        """Build from a DataFrame with ``x`` and ``y`` columns (e.g. the point editor)."""
        return cls(zip(df['x'].tolist(), df['y'].tolist()))

    # ------------------------------------------------------------------
    # Sequence behaviour
    # ------------------------------------------------------------------

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __eq__(self, other):
        if not isinstance(other, PointSet):
            return NotImplemented
        return self._points == other._points

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        inner = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._points)
        return f"PointSet([{inner}])"

    @property
    def xs(self) -> np.ndarray:
        return np.array([p.x for p in self._points], dtype=float)

    @property
    def ys(self) -> np.ndarray:
        return np.array([p.y for p in self._points], dtype=float)

    # ------------------------------------------------------------------
    # Edits (each returns a new PointSet)
    # ------------------------------------------------------------------

    def with_point(self, x=None, y=0.0):
        """Append a point; x defaults to the row number, like a new editor row."""
        if x is None:
            x = float(len(self._points))
        return PointSet(self._points + (Point(x, y),))

    def without(self, index):
        if len(self._points) <= MIN_POINTS:
            raise InsufficientDataError(len(self._points) - 1, MIN_POINTS)
        remaining = list(self._points)
        del remaining[index]
        return PointSet(remaining)

    def replace(self, index, x=None, y=None):
        old = self._points[index]
        updated = list(self._points)
        updated[index] = Point(old.x if x is None else x, old.y if y is None else y)
        return PointSet(updated)

    def sorted(self):
        return PointSet(sorted(self._points, key=lambda p: p.x))

    def reversed(self):
        return PointSet(self._points[::-1])

    # ------------------------------------------------------------------
    # Spacing
    # ------------------------------------------------------------------

    def spacing(self):
        """Step h between the first two abscissae."""
        return self._points[1].x - self._points[0].x

    def steps(self) -> np.ndarray:
        return np.diff(self.xs)

    def first_irregular_step(self, rtol=SPACING_RTOL, atol=SPACING_ATOL):
        """
        Index i of the first step x[i+1] - x[i] that differs from h, or None
        when the abscissae are equally spaced.
        """
        h = self.spacing()
        for i, step in enumerate(self.steps()):
            if not math.isclose(step, h, rel_tol=rtol, abs_tol=atol):
                return i
        return None

    def is_uniform(self, rtol=SPACING_RTOL, atol=SPACING_ATOL):
        return self.first_irregular_step(rtol, atol) is None

    def to_frame(self):
        return pd.DataFrame({'x': self.xs, 'y': self.ys})
