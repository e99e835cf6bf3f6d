"""
Signal helpers.

Public API:
    moving_average(data, window)
    exponential_smooth(current, new, alpha)
    median_filter(window)
    map_range(x, in_min, in_max, out_min, out_max)
    is_in_range(value, lo, hi)
    min_max(data)
    clamp(value, lo, hi)
"""

from pynumerics.filters.solvers import (
    clamp,
    exponential_smooth,
    is_in_range,
    map_range,
    median_filter,
    min_max,
    moving_average,
)

__all__ = [
    "clamp",
    "exponential_smooth",
    "is_in_range",
    "map_range",
    "median_filter",
    "min_max",
    "moving_average",
]
