"""
Regression Design.

RegressionDesign pairs a predictor sample x with a response sample y for
a simple (one predictor plus intercept) least-squares fit.

Building a design never fails on degenerate input: mismatched lengths or
too few points are recorded on the design and the backend answers them
with the zero fit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import check_sample, check_consistent_length


MIN_OBSERVATIONS = 2


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple linear regression design.

    Immutable after construction.

    Construction:
        RegressionDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _mismatch: str | None

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """
        Build design from predictor and response samples.

        Args:
            x: Predictor values (1D)
            y: Response values (1D), paired with x by index

        Raises:
            ValidationError: If x or y is non-numeric
            DimensionError: If x or y is not 1D
        """
        x_arr = check_sample(x, 'x')
        y_arr = check_sample(y, 'y')
        mismatch = check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        return cls(_x=x_arr, _y=y_arr, _mismatch=mismatch)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values."""
        return self._y

    @property
    def n(self) -> int:
        """Number of paired observations (0 when lengths disagree)."""
        if self._mismatch is not None:
            return 0
        return int(self._x.shape[0])

    @property
    def degenerate_reason(self) -> str | None:
        """Why no fit can be attempted, or None if the pairs are usable."""
        if self._mismatch is not None:
            return self._mismatch
        if self._x.shape[0] < MIN_OBSERVATIONS:
            return (
                f"requires at least {MIN_OBSERVATIONS} observations, "
                f"got {self._x.shape[0]}"
            )
        return None

    def __repr__(self) -> str:
        if self._mismatch is not None:
            return f"RegressionDesign({self._mismatch})"
        return f"RegressionDesign(n={self.n})"
