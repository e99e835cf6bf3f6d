"""
CPU reference backend for descriptive statistics.

Computes the mean once and reuses it for every higher moment.
"""

from __future__ import annotations

import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import STD_DEV_FLOOR
from pynumerics.descriptive.design import DescriptiveDesign
from pynumerics.descriptive.solution import DescriptiveParams
from pynumerics.descriptive._moments import (
    sample_mean, sample_variance, sample_sd, sorted_median,
    adjusted_skewness, excess_kurtosis,
)


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_moments'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """
        Compute every descriptive statistic for the design's sample.

        Statistics that need more observations than are available are
        reported as 0.0, and a note is added to the result warnings.
        """
        timer = Timer()
        timer.start()

        x = design.data
        n = design.n
        warnings_list: list[str] = []

        with timer.section('mean'):
            mean = sample_mean(x)

        with timer.section('variance'):
            variance = sample_variance(x, mean)
            sd = sample_sd(x, mean)

        with timer.section('median'):
            median = sorted_median(x)

        with timer.section('shape'):
            skewness = adjusted_skewness(x, mean, sd)
            kurtosis = excess_kurtosis(x, mean, sd)

        with timer.section('range'):
            if n == 0:
                minimum = maximum = 0.0
            else:
                minimum = float(np.min(x))
                maximum = float(np.max(x))

        timer.stop()

        if n == 0:
            warnings_list.append("empty sample: all statistics reported as 0.0")
        elif n < 2:
            warnings_list.append(
                f"n={n}: variance needs at least 2 observations, reported as 0.0"
            )
        if 0 < n < 4:
            warnings_list.append(
                f"n={n}: skewness needs n >= 3 and kurtosis n >= 4, "
                f"undefined values reported as 0.0"
            )
        if n >= 3 and sd < STD_DEV_FLOOR:
            warnings_list.append(
                "near-constant sample: skewness and kurtosis reported as 0.0"
            )

        params = DescriptiveParams(
            n=n,
            mean=mean,
            variance=variance,
            sd=sd,
            median=median,
            skewness=skewness,
            kurtosis=kurtosis,
            minimum=minimum,
            maximum=maximum,
        )

        return Result(
            params=params,
            info={'method': 'two_pass', 'n': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
