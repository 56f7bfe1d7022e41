"""
CPU backend for simple linear regression.

Solves OLS for one predictor in closed form from the running sums
Σx, Σy, Σx², Σxy. Both output conventions are evaluated exactly as
their textbook formulas are written, so they can disagree in the last
few bits even though they are algebraically identical.
"""

from typing import Any
import numpy as np

from olsfit.core.result import Result
from olsfit.core.compute.timing import Timer
from olsfit.points.design import PointSequence
from olsfit.regression._sums import Summary, accumulate, mean_x
from olsfit.regression.solution import FitParams


def solve_slope_intercept(summary: Summary) -> tuple[float, float]:
    """
    Baseline b and slope m such that y ≈ m·x + b.

             N Σ(xy) − Σx Σy
        m = -----------------
             N Σ(x²) − (Σx)²

             Σy − m Σx
        b = -----------
                 N

    Zero variance in x divides by zero and yields NaN or ±Inf.

    Returns:
        (b, m)
    """
    n = np.float64(summary.n)
    sx, sy = np.float64(summary.sum_x), np.float64(summary.sum_y)
    sxx, sxy = np.float64(summary.sum_xx), np.float64(summary.sum_xy)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        m = (n * sxy - sx * sy) / (n * sxx - sx * sx)
        b = (sy - m * sx) / n
    return float(b), float(m)


def solve_coefficients(summary: Summary) -> tuple[float, float]:
    """
    Coefficients a and b such that y ≈ a + b·x.

             Σy Σ(x²) − Σx Σ(xy)
        a = ---------------------
              N Σ(x²) − (Σx)²

             N Σ(xy) − Σx Σy
        b = -----------------
             N Σ(x²) − (Σx)²

    Returns:
        (a, b)
    """
    n = np.float64(summary.n)
    sx, sy = np.float64(summary.sum_x), np.float64(summary.sum_y)
    sxx, sxy = np.float64(summary.sum_xx), np.float64(summary.sum_xy)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        denominator = n * sxx - sx * sx
        a = (sy * sxx - sx * sxy) / denominator
        b = (n * sxy - sx * sy) / denominator
    return float(a), float(b)


_SOLVERS = {
    'slope_intercept': solve_slope_intercept,
    'coefficients': solve_coefficients,
}


class CPUSumsBackend:
    """
    CPU backend using the normal equations in summed form.

    Implements the Backend protocol for PointSequence -> FitParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_sums'

    def solve(self, design: PointSequence, *, convention: str) -> Result[FitParams]:
        """
        Fit y ≈ intercept + slope·x.

        Algorithm:
            1. One pass for Σx, Σy, Σx², Σxy
            2. Closed-form intercept/slope in the requested convention
            3. A second pass for x̄

        Args:
            design: Points to fit
            convention: 'slope_intercept' or 'coefficients'

        Returns:
            Result containing FitParams. A zero-variance x leaves NaN/Inf
            coefficients and a warning on the Result.
        """
        timer = Timer()
        timer.start()

        with timer.section('accumulate'):
            summary = accumulate(design)

        with timer.section('solve'):
            intercept, slope = _SOLVERS[convention](summary)

        with timer.section('mean'):
            x_bar = mean_x(design)

        timer.stop()

        warnings: tuple[str, ...] = ()
        if summary.is_degenerate:
            warnings = (
                f"zero variance in x (all {summary.n} x values equal); "
                f"slope and intercept are undefined",
            )

        params = FitParams(
            intercept=intercept,
            slope=slope,
            convention=convention,
            summary=summary,
            mean_x=x_bar,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'convention': convention,
            'degenerate': summary.is_degenerate,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
