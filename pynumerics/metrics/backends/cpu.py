"""
CPU reference backend for pointwise error metrics.
"""

from __future__ import annotations

import math
import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import MAPE_ACTUAL_FLOOR
from pynumerics.metrics.design import ErrorDesign
from pynumerics.metrics.solution import ErrorParams


class CPUErrorBackend:
    """CPU reference backend for MAE, MSE, RMSE and MAPE."""

    @property
    def name(self) -> str:
        return 'cpu_errors'

    def solve(self, design: ErrorDesign) -> Result[ErrorParams]:
        """
        Compute error metrics of predicted against actual.

        Errors are e = actual - predicted. MAPE skips indices where
        |actual| <= 1e-10 and is 0.0 if every index is skipped.
        """
        timer = Timer()
        timer.start()

        reason = design.degenerate_reason
        if reason is not None:
            timer.stop()
            return Result(
                params=ErrorParams.zero(),
                info={'degenerate': reason},
                timing=timer.result(),
                backend_name=self.name,
                warnings=(f"zero metrics returned: {reason}",),
            )

        actual = design.actual
        n = design.n
        warnings_list: list[str] = []

        with timer.section('errors'):
            errors = actual - design.predicted
            mae = float(np.sum(np.abs(errors)) / n)
            mse = float(np.sum(errors * errors) / n)
            rmse = math.sqrt(mse)

        with timer.section('mape'):
            keep = np.abs(actual) > MAPE_ACTUAL_FLOOR
            k = int(np.count_nonzero(keep))
            if k > 0:
                mape = float(np.sum(np.abs(errors[keep] / actual[keep])) / k * 100.0)
            else:
                mape = 0.0

        timer.stop()

        if k < n:
            warnings_list.append(
                f"{n - k} of {n} actual values are zero: excluded from MAPE"
            )

        params = ErrorParams(mae=mae, mse=mse, rmse=rmse, mape=mape, n_mape=k)

        return Result(
            params=params,
            info={'degenerate': None, 'n': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
