"""
PyNumerics: small numerical utilities for Python.

Descriptive statistics, simple linear regression, pointwise error
metrics, signal helpers and literal string helpers. Every routine is
pure and stateless; degenerate input (too few points, mismatched
lengths, near-zero denominators) yields 0.0 or a zero-initialized
result rather than an exception.

Submodules:
    descriptive: mean, variance, std_dev, median, skewness, kurtosis, describe
    regression: linear_regression
    metrics: calculate_error
    filters: moving_average, exponential_smooth, median_filter, ...
    text: trim, split, starts_with, ends_with
"""

__version__ = "0.1.0"

from pynumerics.descriptive import (
    describe,
    mean,
    variance,
    variance_with_mean,
    std_dev,
    std_dev_with_mean,
    median,
    skewness,
    kurtosis,
)
from pynumerics.regression import linear_regression
from pynumerics.metrics import calculate_error
from pynumerics.filters import (
    clamp,
    exponential_smooth,
    is_in_range,
    map_range,
    median_filter,
    min_max,
    moving_average,
)
from pynumerics.text import trim, split, starts_with, ends_with
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    "__version__",
    # Descriptive statistics
    "describe",
    "mean",
    "variance",
    "variance_with_mean",
    "std_dev",
    "std_dev_with_mean",
    "median",
    "skewness",
    "kurtosis",
    # Regression and error metrics
    "linear_regression",
    "calculate_error",
    # Signal helpers
    "clamp",
    "exponential_smooth",
    "is_in_range",
    "map_range",
    "median_filter",
    "min_max",
    "moving_average",
    # String helpers
    "trim",
    "split",
    "starts_with",
    "ends_with",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
]
