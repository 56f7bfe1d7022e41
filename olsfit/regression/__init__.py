"""
Simple linear regression.

Public API:
    fit(points, ...) -> FitSolution
    best_fit(points) -> (b, m)        y = m·x + b
    least_squares(points) -> (a, b)   y = a + b·x

fit() handles:
    - Input validation
    - Convention and backend selection
    - Result wrapping

Example:
    >>> from olsfit.regression import fit
    >>> solution = fit([(43, 99), (21, 65), (25, 79), (42, 75), (57, 87), (59, 81)])
    >>> print(solution.summary())
"""

from olsfit.regression._sums import Summary, accumulate, mean_x
from olsfit.regression.solution import FitSolution, FitParams
from olsfit.regression.solvers import (
    fit,
    best_fit,
    least_squares,
    Convention,
    CONVENTIONS,
)

__all__ = [
    "fit",
    "best_fit",
    "least_squares",
    "accumulate",
    "mean_x",
    "Summary",
    "FitSolution",
    "FitParams",
    "Convention",
    "CONVENTIONS",
]
