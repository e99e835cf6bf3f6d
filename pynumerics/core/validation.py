"""
Input validation utilities for PyNumerics.

These validators raise immediately with clear error messages when input
cannot be interpreted. They deliberately do NOT reject degenerate input
(empty samples, mismatched lengths): the numerical routines answer
those with zero sentinels.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pynumerics.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    An empty sequence converts to an empty float64 array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not callable(array.values):
        # pandas Series / DataFrame column
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        result = result.astype(np.float64)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            name=name,
            shape=tuple(array.shape),
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_sample(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert a sample to a 1D float64 array.

    A column vector of shape (n, 1) is flattened; any other non-1D shape
    is rejected.

    Args:
        array: Input sample
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of float64

    Raises:
        ValidationError: If input is non-numeric
        DimensionError: If input is not 1D
    """
    result = check_array(array, name)
    if result.ndim == 2 and result.shape[1] == 1:
        result = result.ravel()
    check_1d(result, name)
    return result


def check_scalar(value: Any, name: str) -> float:
    """
    Convert a real scalar to float.

    Args:
        value: Input value
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (str, bytes)) or isinstance(value, complex):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    try:
        return float(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: expected a real number: {e}") from e


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> str | None:
    """
    Describe a length mismatch between paired samples.

    Unlike a hard check, this returns a message instead of raising: paired
    routines answer mismatched input with a zero result.

    Args:
        *arrays: Arrays to compare
        names: Parameter names for messages (must match number of arrays)

    Returns:
        None if all lengths agree, else a description of the mismatch

    Raises:
        ValueError: If number of names doesn't match number of arrays
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        return f"Inconsistent lengths: {details}"
    return None
