"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from olsfit.points import PointSequence


# Six points used throughout as a worked example:
#   Σx = 247, Σy = 486, Σx² = 11409, Σxy = 20485
TEXTBOOK_PAIRS = [(43, 99), (21, 65), (25, 79), (42, 75), (57, 87), (59, 81)]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_points():
    return PointSequence.from_pairs(TEXTBOOK_PAIRS)


@pytest.fixture
def line_points():
    """Points exactly on y = 2x + 1."""
    x = np.arange(1.0, 6.0)
    return PointSequence.from_arrays(x, 2.0 * x + 1.0)


@pytest.fixture
def noisy_points(rng):
    """Noisy line y = 1.5 + 2x + e, n = 100."""
    n = 100
    x = rng.standard_normal(n) * 3.0 + 10.0
    y = 1.5 + 2.0 * x + rng.standard_normal(n) * 0.5
    return PointSequence.from_arrays(x, y)


@pytest.fixture
def degenerate_points():
    """Every x equal: zero variance, no unique line."""
    return PointSequence.from_pairs([(5, 1), (5, 2)])
