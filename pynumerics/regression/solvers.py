"""
Solver dispatch for regression.

This module provides the linear_regression() function (public API) and
backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.regression.design import RegressionDesign
from pynumerics.regression.solution import LinearSolution
from pynumerics.regression.backends.cpu import CPUNormalEquationsBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def linear_regression(
    x: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSolution:
    """
    Fit a straight line y = slope * x + intercept by least squares.

    Degenerate input is not an error. The zero fit (slope, intercept, r2
    and rmse all 0.0, empty residuals) is returned when:
        - x and y have different lengths
        - there are fewer than 2 observations
        - x is constant, i.e. |n * Sxx - Sx^2| < 1e-10

    R-squared is 0.0 when y is constant. RMSE uses divisor n (not n - 2).

    Args:
        x: Predictor values (1D array-like) or a RegressionDesign
        y: Response values (1D array-like), paired with x by index.
            Omit when x is a RegressionDesign.
        backend: 'auto' or 'cpu'

    Returns:
        LinearSolution with slope, intercept, r2, rmse and residuals

    Raises:
        ValidationError: If inputs are non-numeric or backend is unknown
        ValidationError: If y is omitted and x is not a RegressionDesign
        DimensionError: If x or y is not 1D

    Example:
        >>> from pynumerics.regression import linear_regression
        >>> fit = linear_regression([1, 2, 3, 4], [2, 4, 6, 8])
        >>> fit.slope, fit.intercept
        (2.0, 0.0)
    """
    if isinstance(x, RegressionDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y required when x is not a RegressionDesign")
        design = RegressionDesign.from_arrays(x, y)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUNormalEquationsBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
