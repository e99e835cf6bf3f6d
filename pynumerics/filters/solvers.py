"""
Scalar and windowed signal helpers.

These are thin conveniences for sensor-style streams built on the
descriptive statistics: a trailing moving average, first-order
exponential smoothing, a median filter, and a few range utilities.
Like the rest of the library they return 0.0 for empty input instead of
raising.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import check_sample, check_scalar
from pynumerics.descriptive._moments import sample_mean, sorted_median


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit ``value`` to the closed interval [lo, hi]."""
    value = check_scalar(value, 'value')
    lo = check_scalar(lo, 'lo')
    hi = check_scalar(hi, 'hi')
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def moving_average(data: ArrayLike, window: int) -> float:
    """
    Mean of the last ``window`` samples.

    A window longer than the data averages all of it. Returns 0.0 for an
    empty sample or a non-positive window.
    """
    if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
        raise ValidationError(f"window: expected an integer, got {type(window).__name__}")
    x = check_sample(data, 'data')
    n = x.shape[0]
    if n == 0 or window <= 0:
        return 0.0
    w = min(int(window), n)
    return sample_mean(x[n - w:])


def exponential_smooth(current: float, new: float, alpha: float) -> float:
    """
    One step of exponential smoothing: alpha * new + (1 - alpha) * current.

    ``alpha`` is clamped to [0, 1].
    """
    a = clamp(check_scalar(alpha, 'alpha'), 0.0, 1.0)
    return a * check_scalar(new, 'new') + (1.0 - a) * check_scalar(current, 'current')


def median_filter(window: ArrayLike) -> float:
    """Median of a window of samples (0.0 for an empty window)."""
    return sorted_median(check_sample(window, 'window'))


def map_range(
    x: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """
    Linearly rescale ``x`` from [in_min, in_max] to [out_min, out_max].

    No clamping is applied. A zero-width input range maps everything to
    ``out_min``.
    """
    x = check_scalar(x, 'x')
    in_min = check_scalar(in_min, 'in_min')
    in_max = check_scalar(in_max, 'in_max')
    out_min = check_scalar(out_min, 'out_min')
    out_max = check_scalar(out_max, 'out_max')
    if in_min == in_max:
        return out_min
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def is_in_range(value: float, lo: float, hi: float) -> bool:
    """True if lo <= value <= hi."""
    return check_scalar(lo, 'lo') <= check_scalar(value, 'value') <= check_scalar(hi, 'hi')


def min_max(data: ArrayLike) -> tuple[float, float]:
    """Smallest and largest sample, or (0.0, 0.0) for an empty sample."""
    x = check_sample(data, 'data')
    if x.shape[0] == 0:
        return 0.0, 0.0
    return float(np.min(x)), float(np.max(x))
