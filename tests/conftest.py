"""
Shared fixtures. Puts the project root on sys.path so the flat modules
import without installing the package.
"""
import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from points import PointSet  # noqa: E402


@pytest.fixture
def squares():
    """y = x^2 sampled at x = 0, 1, 2, 3."""
    return PointSet([(0, 0), (1, 1), (2, 4), (3, 9)])


@pytest.fixture
def line():
    return PointSet([(0, 0), (1, 1)])


@pytest.fixture
def cubic():
    """y = 2x^3 - x + 5 at x = -1.0, -0.5, ..., 1.5 (h = 0.5)."""
    xs = [-1.0 + 0.5 * i for i in range(6)]
    return PointSet([(x, 2 * x ** 3 - x + 5) for x in xs])
