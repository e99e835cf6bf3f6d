"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.result import Result
from pynumerics.core.validation import check_array

if TYPE_CHECKING:
    from pynumerics.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends. The zero fit has
    every scalar at 0.0 and empty residuals.
    """
    slope: float
    intercept: float
    r2: float
    rmse: float
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float

    @classmethod
    def zero(cls) -> LinearParams:
        """The zero-initialized fit returned for degenerate input."""
        return cls(
            slope=0.0,
            intercept=0.0,
            r2=0.0,
            rmse=0.0,
            residuals=np.empty(0, dtype=np.float64),
            rss=0.0,
            tss=0.0,
        )


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides accessors for the fitted line
    and its goodness-of-fit diagnostics.
    """
    _result: Result[LinearParams]
    _design: 'RegressionDesign'

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def r2(self) -> float:
        """Coefficient of determination, 1 - SS_res / SS_tot (0.0 if SS_tot == 0)."""
        return self._result.params.r2

    @property
    def rmse(self) -> float:
        """Root mean squared residual, sqrt(SS_res / n)."""
        return self._result.params.rmse

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """y - (slope * x + intercept), in input order."""
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        if self.is_degenerate:
            return np.empty(0, dtype=np.float64)
        return self._design.y - self.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def is_degenerate(self) -> bool:
        """True if the input was rejected and this is the zero fit."""
        return self._result.info.get('degenerate') is not None

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate slope * x + intercept at new predictor values."""
        x_arr = check_array(x, 'x')
        return self.slope * x_arr + self.intercept

    # --- Metadata ---

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
        """Generate a text summary of the fit."""
        lines = [
            "Simple Linear Regression",
            "=" * 40,
            f"Observations: {self.n}",
            "",
            f"  y = {self.slope:.6g} * x + {self.intercept:.6g}",
            "",
            f"Slope:      {self.slope:12.6f}",
            f"Intercept:  {self.intercept:12.6f}",
            f"R-squared:  {self.r2:12.6f}",
            f"RMSE:       {self.rmse:12.6f}",
        ]
        if self.is_degenerate:
            lines.append("")
            lines.append(f"Degenerate input: {self.info['degenerate']}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(slope={self.slope:.6g}, intercept={self.intercept:.6g}, "
            f"r2={self.r2:.6g}, n={self.n})"
        )
