"""
Pointwise error metrics between two aligned samples.

Public API:
    calculate_error(actual, predicted) -> ErrorSolution  (mae, mse, rmse, mape)
"""

from pynumerics.metrics.design import ErrorDesign
from pynumerics.metrics.solution import ErrorParams, ErrorSolution
from pynumerics.metrics.solvers import calculate_error

__all__ = [
    "calculate_error",
    "ErrorDesign",
    "ErrorParams",
    "ErrorSolution",
]
