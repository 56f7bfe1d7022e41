"""
Cross-check fit() against an independent reference implementation.

scipy.stats.linregress uses centred sums, so agreement is checked at
the reference tolerance tier rather than bit-for-bit.
"""

import numpy as np
import pytest

scipy_stats = pytest.importorskip("scipy.stats")

from olsfit.core.compute.tolerances import select_tolerance
from olsfit.points import PointSequence
from olsfit.regression import fit


TOL = select_tolerance(against_reference=True)


def _check(points, convention):
    reference = scipy_stats.linregress(points.x, points.y)
    solution = fit(points, convention=convention)
    np.testing.assert_allclose(solution.slope, reference.slope, rtol=TOL.rtol, atol=TOL.atol)
    np.testing.assert_allclose(
        solution.intercept, reference.intercept, rtol=TOL.rtol, atol=TOL.atol
    )


@pytest.mark.parametrize("convention", ['slope_intercept', 'coefficients'])
class TestAgainstLinregress:

    def test_textbook(self, textbook_points, convention):
        _check(textbook_points, convention)

    def test_noisy(self, noisy_points, convention):
        _check(noisy_points, convention)

    def test_negative_slope(self, rng, convention):
        x = rng.uniform(0, 100, size=250)
        y = 40.0 - 0.3 * x + rng.standard_normal(250) * 2.0
        _check(PointSequence.from_arrays(x, y), convention)

    def test_two_points(self, convention):
        _check(PointSequence.from_pairs([(1, 1), (3, 2)]), convention)
