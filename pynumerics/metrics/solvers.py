"""
Solver dispatch for error metrics.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pynumerics.core.exceptions import ValidationError
from pynumerics.metrics.design import ErrorDesign
from pynumerics.metrics.solution import ErrorSolution
from pynumerics.metrics.backends.cpu import CPUErrorBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice):
    if backend in ('auto', 'cpu'):
        return CPUErrorBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def calculate_error(
    actual: ArrayLike,
    predicted: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> ErrorSolution:
    """
    Compare two samples aligned by index.

    Parameters
    ----------
    actual : array-like
        Observed values (1D).
    predicted : array-like
        Predicted values (1D), same length as ``actual``.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    ErrorSolution with mae, mse, rmse and mape (percent).
    All four are 0.0 when the lengths differ or the samples are empty.

    Notes
    -----
    MAPE only averages over indices whose actual value is non-zero
    (|actual| > 1e-10). Zero actuals are skipped silently, not rejected,
    so series with occasional zeros still get a MAPE.
    """
    design = ErrorDesign.from_arrays(actual, predicted)
    be = _get_backend(backend)
    result = be.solve(design)
    return ErrorSolution(_result=result, _design=design)
