"""
Solver dispatch for regression.

This module provides fit() (public API), the two convention shortcuts
best_fit() and least_squares(), and backend selection.
"""

from __future__ import annotations

from typing import Iterable, Literal, Sequence
import warnings

from numpy.typing import ArrayLike

from olsfit.core.exceptions import ValidationError
from olsfit.core.protocols import Backend
from olsfit.core.validation import check_choice, check_min_samples
from olsfit.points.design import PointSequence
from olsfit.regression.solution import FitSolution
from olsfit.regression.backends.cpu import CPUSumsBackend


Convention = Literal['slope_intercept', 'coefficients']
CONVENTIONS: tuple[str, ...] = ('slope_intercept', 'coefficients')

BackendChoice = Literal['auto', 'cpu', 'cpu_sums']
BACKENDS: tuple[str, ...] = ('auto', 'cpu', 'cpu_sums')


def fit(
    points: PointSequence | Iterable[Sequence[float]] | ArrayLike,
    y: ArrayLike | None = None,
    *,
    convention: Convention = 'slope_intercept',
    backend: BackendChoice = 'auto',
) -> FitSolution:
    """
    Fit a straight line by ordinary least squares.

    Args:
        points: A PointSequence, an iterable of (x, y) pairs, or the x
            values when y is given.
        y: y values, when points holds x values only.
        convention: Output convention:
            - 'slope_intercept': (b, m) with y ≈ m·x + b
            - 'coefficients': (a, b) with y ≈ a + b·x
        backend: 'auto', 'cpu' or 'cpu_sums' (all the same solver)

    Returns:
        FitSolution with intercept, slope, sums and x̄

    Raises:
        ValidationError: If inputs are invalid, there are no points,
            or convention/backend is unknown
        DimensionError: If x and y have inconsistent lengths

    Zero variance in x is not an error: the coefficients come back as
    NaN or ±Inf and a RuntimeWarning is issued.

    Example:
        >>> from olsfit.regression import fit
        >>> solution = fit([(1, 3), (2, 5), (3, 7)])
        >>> solution.slope, solution.intercept
        (2.0, 1.0)
    """
    # === Input Validation ===
    check_choice(convention, CONVENTIONS, 'convention')
    design = _ensure_points(points, y)
    check_min_samples(design.n, 1, 'points')

    # === Solve ===
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design, convention=convention)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return FitSolution(_result=result, _points=design)


def best_fit(points: PointSequence | Iterable[Sequence[float]]) -> tuple[float, float]:
    """
    Baseline b and slope m of the OLS line y = m·x + b.

    Returns:
        (b, m)
    """
    return fit(points, convention='slope_intercept').coefficients


def least_squares(points: PointSequence | Iterable[Sequence[float]]) -> tuple[float, float]:
    """
    Coefficients a and b of the OLS line y = a + b·x.

    Returns:
        (a, b)
    """
    return fit(points, convention='coefficients').coefficients


def _ensure_points(points, y) -> PointSequence:
    """Convert raw input to a PointSequence if needed."""
    if isinstance(points, PointSequence):
        if y is not None:
            raise ValidationError("y must not be given with a PointSequence")
        return points
    if y is not None:
        return PointSequence.from_arrays(points, y)
    return PointSequence.from_pairs(points)


def _get_backend(choice: BackendChoice) -> Backend:
    """
    Select and instantiate the backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_sums'):
        return CPUSumsBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")
