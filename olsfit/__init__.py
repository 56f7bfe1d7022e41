"""
olsfit: ordinary least-squares line fitting.

Fits y ≈ m·x + b to a set of (x, y) points given as arrays, pairs,
command-line arguments, or any file of delimiter-separated numbers.

Submodules:
    points: PointSequence and the numeric token scanner
    regression: Summary accumulator and closed-form OLS solver
    cli: The `olsfit` command
"""

__version__ = "0.1.0"

from olsfit import points
from olsfit import regression
from olsfit.points import PointSequence
from olsfit.regression import fit, best_fit, least_squares

__all__ = [
    "__version__",
    "points",
    "regression",
    "PointSequence",
    "fit",
    "best_fit",
    "least_squares",
]
