"""
Summary accumulator.

Reduces a PointSequence to the four sums the closed-form OLS equations
need. Summation is plain left-to-right float64 addition in input order;
numpy's pairwise sum() would round differently and is not used.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from olsfit.points.design import PointSequence


@dataclass(frozen=True)
class Summary:
    """
    Sufficient statistics for a simple linear fit.

    Attributes:
        sum_x: Σx
        sum_y: Σy
        sum_xx: Σx²
        sum_xy: Σxy
        n: Number of points
    """
    sum_x: float
    sum_y: float
    sum_xx: float
    sum_xy: float
    n: int

    @property
    def denominator(self) -> float:
        """N·Σx² − (Σx)², zero exactly when every x is equal."""
        return float(self.n * self.sum_xx - self.sum_x * self.sum_x)

    @property
    def is_degenerate(self) -> bool:
        return self.denominator == 0.0


def accumulate(points: PointSequence) -> Summary:
    """
    Compute (Σx, Σy, Σx², Σxy) in a single pass.

    An empty sequence gives all-zero sums.
    """
    sum_x = sum_y = sum_xx = sum_xy = 0.0
    for x, y in points:
        sum_x += x
        sum_y += y
        sum_xx += x * x
        sum_xy += x * y
    return Summary(sum_x=sum_x, sum_y=sum_y, sum_xx=sum_xx, sum_xy=sum_xy, n=points.n)


def mean_x(points: PointSequence) -> float:
    """
    Mean of x (x̄), from its own pass over the sequence.

    Returns NaN for an empty sequence.
    """
    total = 0.0
    for x in points.x.tolist():
        total += x
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(total) / np.float64(points.n))
