"""
CPU reference backend for simple linear regression.

Solves the 2x2 normal equations in closed form from the sums
n, Sx, Sy, Sxy, Sxx.
"""

from typing import Any
import math
import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import DENOMINATOR_FLOOR
from pynumerics.regression.design import RegressionDesign
from pynumerics.regression.solution import LinearParams


class CPUNormalEquationsBackend:
    """
    CPU backend using the closed-form normal equations.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_normal_equations'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Fit y = slope * x + intercept by ordinary least squares.

        Algorithm:
            1. D = n * Sxx - Sx^2; |D| < 1e-10 means x is (nearly) constant
            2. slope = (n * Sxy - Sx * Sy) / D
            3. intercept = (Sy - slope * Sx) / n
            4. residuals, SS_res, SS_tot, R^2 and RMSE (divisor n)

        Args:
            design: Regression design

        Returns:
            Result containing LinearParams. Degenerate designs give
            LinearParams.zero() with the reason in info['degenerate'].
        """
        timer = Timer()
        timer.start()

        reason = design.degenerate_reason
        if reason is not None:
            timer.stop()
            return self._zero_result(reason, timer)

        x = design.x
        y = design.y
        n = float(design.n)

        # === Sums ===
        with timer.section('sums'):
            sum_x = float(np.sum(x))
            sum_y = float(np.sum(y))
            sum_xy = float(np.sum(x * y))
            sum_x2 = float(np.sum(x * x))

        denominator = n * sum_x2 - sum_x * sum_x
        if abs(denominator) < DENOMINATOR_FLOOR:
            timer.stop()
            return self._zero_result(
                f"x is constant or nearly so (|n*Sxx - Sx^2| = {abs(denominator):.3g})",
                timer,
            )

        # === Coefficients ===
        with timer.section('solve'):
            slope = (n * sum_xy - sum_x * sum_y) / denominator
            intercept = (sum_y - slope * sum_x) / n

        # === Residuals ===
        with timer.section('residuals'):
            residuals = y - (slope * x + intercept)

        # === Goodness of fit ===
        with timer.section('statistics'):
            rss = float(np.sum(residuals * residuals))
            y_mean = sum_y / n
            tss = float(np.sum((y - y_mean) ** 2))
            r2 = 1.0 - rss / tss if tss > 0 else 0.0
            rmse = math.sqrt(rss / n)

        timer.stop()

        warnings_list: list[str] = []
        if tss <= 0:
            warnings_list.append("y is constant (SS_tot = 0): R-squared reported as 0.0")

        params = LinearParams(
            slope=slope,
            intercept=intercept,
            r2=r2,
            rmse=rmse,
            residuals=residuals,
            rss=rss,
            tss=tss,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'denominator': denominator,
            'degenerate': None,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _zero_result(self, reason: str, timer: Timer) -> Result[LinearParams]:
        return Result(
            params=LinearParams.zero(),
            info={'method': 'normal_equations', 'degenerate': reason},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(f"zero fit returned: {reason}",),
        )
