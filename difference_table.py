"""
Interpolation Lab - Finite Difference Table

Builds the forward-difference pyramid of a point set:

    Δ^k y[j] = Δ^(k-1) y[j+1] - Δ^(k-1) y[j],   Δ^0 y[j] = y[j]

Only the y-values are used; spacing is checked by the interpolator that
consumes the table.
"""

import logging

import numpy as np
import pandas as pd

from errors import InsufficientDataError
from points import MIN_POINTS, PointSet

logger = logging.getLogger(__name__)


class DifferenceTable:
    """
    Triangular table of finite differences.

    ``rows[k - 1]`` holds the order-k differences (length n - k). Order 0
    (the y-values themselves) is kept separately in ``values``.
    """

    def __init__(self, values, rows):
        self.values = np.asarray(values, dtype=float)
        self.rows = tuple(np.asarray(row, dtype=float) for row in rows)

    @classmethod
    def build(cls, points):
        """Compute the n - 1 difference rows of ``points``."""
        if not isinstance(points, PointSet):
            points = list(points)
            if len(points) < MIN_POINTS:
                raise InsufficientDataError(len(points), MIN_POINTS)
            points = PointSet(points)

        values = points.ys
        rows = []
        previous = values
        for _ in range(1, len(values)):
            previous = np.diff(previous)
            rows.append(previous)

        logger.debug(f"Built difference table: n={len(values)}, orders={len(rows)}")
        return cls(values, rows)

    @property
    def size(self):
        """Number of sample points the table was built from."""
        return len(self.values)

    @property
    def max_order(self):
        return len(self.rows)

    def order(self, k):
        """Row of order-k differences (k = 0 gives the y-values)."""
        if k == 0:
            return self.values
        if not 1 <= k <= self.max_order:
            raise IndexError(f"Difference order {k} outside 0..{self.max_order}")
        return self.rows[k - 1]

    def leading(self, k):
        """Forward reference entry Δ^k y[0]."""
        return float(self.order(k)[0])

    def trailing(self, k):
        """Backward reference entry Δ^k y[n-1-k], the last entry of the row."""
        row = self.order(k)
        return float(row[self.size - 1 - k])

    def degree(self, atol=1e-12):
        """
        Highest order with a non-zero difference, i.e. the degree of the
        interpolating polynomial.
        """
        for k in range(self.max_order, 0, -1):
            if not np.allclose(self.rows[k - 1], 0.0, atol=atol):
                return k
        return 0

    def to_frame(self, xs=None, decimals=None):
        """
        Triangular table as a DataFrame: ``x`` (if given), ``y`` and one
        ``Δ^k y`` column per order, padded with NaN below the diagonal.
        """
        data = {}
        if xs is not None:
            data['x'] = np.asarray(xs, dtype=float)
        data['y'] = self.values
        for k, row in enumerate(self.rows, start=1):
            column = np.full(self.size, np.nan)
            column[:len(row)] = row
            data[f"Δ^{k}y"] = column

        df = pd.DataFrame(data)
        if decimals is not None:
            df = df.round(decimals)
        return df

    def __repr__(self):
        return f"DifferenceTable(n={self.size})"
