"""
Textbook two-pass moment formulas.

Every function takes a validated 1D float64 array and returns a Python
float. The small-sample and near-zero-spread guards live here so that the
scalar functions and describe() share one code path.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.compute.tolerances import STD_DEV_FLOOR


def sample_mean(x: NDArray) -> float:
    """Arithmetic mean; 0.0 for an empty sample."""
    n = x.shape[0]
    if n == 0:
        return 0.0
    return float(np.sum(x) / n)


def sample_variance(x: NDArray, mean: float) -> float:
    """Bessel-corrected variance about ``mean``; 0.0 when n < 2."""
    n = x.shape[0]
    if n < 2:
        return 0.0
    diff = x - mean
    return float(np.sum(diff * diff) / (n - 1))


def sample_sd(x: NDArray, mean: float) -> float:
    """Square root of sample_variance(x, mean)."""
    return math.sqrt(sample_variance(x, mean))


def sorted_median(x: NDArray) -> float:
    """
    Median via a sorted copy.

    Even n averages the two central order statistics.
    """
    n = x.shape[0]
    if n == 0:
        return 0.0
    xs = np.sort(x)
    mid = n // 2
    if n % 2 == 0:
        return float((xs[mid - 1] + xs[mid]) / 2.0)
    return float(xs[mid])


def adjusted_skewness(x: NDArray, mean: float, sd: float) -> float:
    """
    Bias-adjusted skewness g1 = n / ((n-1)(n-2)) * sum(z^3).

    Same value as Excel SKEW and scipy.stats.skew(bias=False) when ``mean``
    and ``sd`` are the sample mean and sample standard deviation.
    """
    n = x.shape[0]
    if n < 3 or sd < STD_DEV_FLOOR:
        return 0.0
    z = (x - mean) / sd
    total = float(np.sum(z ** 3))
    return total * n / ((n - 1) * (n - 2))


def excess_kurtosis(x: NDArray, mean: float, sd: float) -> float:
    """
    Sample-adjusted excess kurtosis G2.

    G2 = n(n+1) / ((n-1)(n-2)(n-3)) * sum(z^4) - 3(n-1)^2 / ((n-2)(n-3))
    """
    n = x.shape[0]
    if n < 4 or sd < STD_DEV_FLOOR:
        return 0.0
    z = (x - mean) / sd
    total = float(np.sum(z ** 4))
    numerator = n * (n + 1) * total
    denominator = (n - 1) * (n - 2) * (n - 3)
    adjustment = 3.0 * (n - 1) * (n - 1) / ((n - 2) * (n - 3))
    return numerator / denominator - adjustment
