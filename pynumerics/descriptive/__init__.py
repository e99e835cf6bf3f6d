"""
Descriptive statistics module.

Public API:
    describe(data)                 - All statistics at once
    mean(data)                     - Arithmetic mean
    variance(data)                 - Sample variance (Bessel-corrected)
    variance_with_mean(data, m)    - Sample variance about a given mean
    std_dev(data)                  - Sample standard deviation
    std_dev_with_mean(data, m)     - Sample standard deviation about a given mean
    median(data)                   - Median
    skewness(data, m, s)           - Bias-corrected skewness g1
    kurtosis(data, m, s)           - Sample-adjusted excess kurtosis G2

Every function returns 0.0 for statistics that the sample is too small
(or too constant) to define.
"""

from pynumerics.descriptive.design import DescriptiveDesign
from pynumerics.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pynumerics.descriptive.solvers import (
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

__all__ = [
    "describe",
    "mean",
    "variance",
    "variance_with_mean",
    "std_dev",
    "std_dev_with_mean",
    "median",
    "skewness",
    "kurtosis",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
