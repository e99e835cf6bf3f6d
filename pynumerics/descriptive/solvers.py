"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus the scalar
functions mean(), variance(), std_dev(), median(), skewness(), kurtosis()
and the caller-supplied-mean forms variance_with_mean() and
std_dev_with_mean().

Scalar functions return plain floats and never raise on degenerate
input: too few observations give 0.0.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import check_sample, check_scalar
from pynumerics.descriptive.design import DescriptiveDesign
from pynumerics.descriptive.solution import DescriptiveSolution
from pynumerics.descriptive.backends.cpu import CPUDescriptiveBackend
from pynumerics.descriptive._moments import (
    sample_mean, sample_variance, sample_sd, sorted_median,
    adjusted_skewness, excess_kurtosis,
)


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute all descriptive statistics at once.

    Computes: n, mean, variance, standard deviation, median, skewness,
    excess kurtosis, minimum and maximum. The mean and standard deviation
    are computed once and shared by the higher moments.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D sample.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with all statistics populated.
    """
    design = _ensure_design(data)
    be = _get_backend(backend)
    result = be.solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def mean(data: ArrayLike) -> float:
    """
    Arithmetic mean.

    Returns 0.0 for an empty sample.
    """
    return sample_mean(check_sample(data, 'data'))


def variance(data: ArrayLike) -> float:
    """
    Sample variance with Bessel's correction (divisor n - 1).

    Returns 0.0 when there are fewer than 2 observations.
    """
    x = check_sample(data, 'data')
    return sample_variance(x, sample_mean(x))


def variance_with_mean(data: ArrayLike, mean: float) -> float:
    """
    Sample variance about a caller-supplied mean.

    The mean is used verbatim: it is neither recomputed nor checked
    against the data. Use this to amortize one mean() call over several
    moments.

    Returns 0.0 when there are fewer than 2 observations.
    """
    x = check_sample(data, 'data')
    return sample_variance(x, check_scalar(mean, 'mean'))


def std_dev(data: ArrayLike) -> float:
    """Sample standard deviation, sqrt(variance(data))."""
    x = check_sample(data, 'data')
    return sample_sd(x, sample_mean(x))


def std_dev_with_mean(data: ArrayLike, mean: float) -> float:
    """Sample standard deviation about a caller-supplied mean."""
    x = check_sample(data, 'data')
    return sample_sd(x, check_scalar(mean, 'mean'))


def median(data: ArrayLike) -> float:
    """
    Median of the sample.

    Sorts a copy; the input is not modified. For even n, returns the mean
    of the two central values. Returns 0.0 for an empty sample.
    """
    return sorted_median(check_sample(data, 'data'))


def skewness(data: ArrayLike, mean: float, std_dev: float) -> float:
    """
    Bias-corrected sample skewness.

    g1 = n / ((n-1)(n-2)) * sum(((x - mean) / std_dev) ** 3)

    Parameters
    ----------
    data : array-like
        1D sample.
    mean, std_dev : float
        Location and scale, normally mean(data) and std_dev(data).

    Returns
    -------
    float
        0.0 if n < 3 or std_dev < 1e-10.
    """
    x = check_sample(data, 'data')
    return adjusted_skewness(
        x, check_scalar(mean, 'mean'), check_scalar(std_dev, 'std_dev')
    )


def kurtosis(data: ArrayLike, mean: float, std_dev: float) -> float:
    """
    Sample-adjusted excess kurtosis.

    G2 = n(n+1) / ((n-1)(n-2)(n-3)) * sum(((x - mean) / std_dev) ** 4)
         - 3(n-1)^2 / ((n-2)(n-3))

    A normal sample scores about 0.

    Returns
    -------
    float
        0.0 if n < 4 or std_dev < 1e-10.
    """
    x = check_sample(data, 'data')
    return excess_kurtosis(
        x, check_scalar(mean, 'mean'), check_scalar(std_dev, 'std_dev')
    )
