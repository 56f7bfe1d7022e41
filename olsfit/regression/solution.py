"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike

from olsfit.core.result import Result

if TYPE_CHECKING:
    from olsfit.points.design import PointSequence
    from olsfit.regression._sums import Summary


# Coefficient labels, in the order each convention reports them
COEFFICIENT_NAMES = {
    'slope_intercept': ('b', 'm'),
    'coefficients': ('a', 'b'),
}


@dataclass(frozen=True)
class FitParams:
    """
    Parameter payload for a simple linear fit.

    This is the immutable data computed by backends. In both
    conventions `intercept` is the constant term and `slope`
    multiplies x.
    """
    intercept: float
    slope: float
    convention: str
    summary: 'Summary'
    mean_x: float


@dataclass
class FitSolution:
    """
    User-facing fit results.

    Wraps the backend Result and keeps the points that produced it.
    """
    _result: Result[FitParams]
    _points: 'PointSequence'

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def coefficients(self) -> tuple[float, float]:
        """(b, m) for 'slope_intercept', (a, b) for 'coefficients'."""
        return self.intercept, self.slope

    @property
    def coefficient_names(self) -> tuple[str, str]:
        return COEFFICIENT_NAMES[self.convention]

    @property
    def convention(self) -> str:
        return self._result.params.convention

    @property
    def n(self) -> int:
        return self._points.n

    @property
    def points(self) -> 'PointSequence':
        return self._points

    @property
    def summary_statistics(self) -> 'Summary':
        """The sums (Σx, Σy, Σx², Σxy) the fit was solved from."""
        return self._result.params.summary

    @property
    def mean_x(self) -> float:
        return self._result.params.mean_x

    @property
    def y_at_mean(self) -> float:
        """Fitted y at x = x̄."""
        return self.predict(self.mean_x)

    @property
    def degenerate(self) -> bool:
        """True when every x is equal and the fit is undefined."""
        return bool(self._result.info.get('degenerate', False))

    def predict(self, x: ArrayLike) -> Any:
        """
        Fitted y for x (scalar or array).

        Scalars come back as float, arrays as float64 ndarrays.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        with np.errstate(invalid='ignore', over='ignore'):
            y = self.slope * x_arr + self.intercept
        if y.ndim == 0:
            return float(y)
        return y

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a human-readable summary of the fit."""
        first, second = self.coefficient_names
        s = self.summary_statistics
        lines = [
            "Ordinary Least Squares (OLS) Fit",
            "=" * 48,
            f"Points: {self.n}",
            f"Convention: {self.convention}",
            "",
            "Sums:",
            f"  Σx  = {s.sum_x:.6f}",
            f"  Σy  = {s.sum_y:.6f}",
            f"  Σx² = {s.sum_xx:.6f}",
            f"  Σxy = {s.sum_xy:.6f}",
            "",
            "Coefficients:",
            "-" * 48,
            f"  {first} = {self.intercept:.6f}  (intercept)",
            f"  {second} = {self.slope:.6f}  (slope)",
            "-" * 48,
            f"y = {self.y_at_mean:.6f} at x = x̄ = {self.mean_x:.6f}",
        ]

        for warning in self.warnings:
            lines.append(f"Warning: {warning}")

        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(n={self.n}, convention={self.convention!r}, "
            f"intercept={self.intercept:.6g}, slope={self.slope:.6g})"
        )
