"""
Simple linear regression.

Public API:
    linear_regression(x, y, ...) -> LinearSolution

Example:
    >>> from pynumerics.regression import linear_regression
    >>> result = linear_regression(x, y)
    >>> print(result.slope, result.intercept, result.r2)
    >>> print(result.summary())
"""

from pynumerics.regression.design import RegressionDesign
from pynumerics.regression.solution import LinearSolution, LinearParams
from pynumerics.regression.solvers import linear_regression

__all__ = [
    "linear_regression",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
