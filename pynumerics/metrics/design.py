"""
ErrorDesign: aligned actual/predicted samples for error metrics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import check_sample, check_consistent_length


@dataclass(frozen=True)
class ErrorDesign:
    """
    Pair of samples compared index by index.

    Mismatched lengths and empty samples are accepted and recorded; the
    backend answers them with all-zero metrics.

    Construction:
        ErrorDesign.from_arrays(actual, predicted)
    """
    _actual: NDArray[np.floating[Any]]
    _predicted: NDArray[np.floating[Any]]
    _mismatch: str | None

    @classmethod
    def from_arrays(cls, actual: ArrayLike, predicted: ArrayLike) -> ErrorDesign:
        actual_arr = check_sample(actual, 'actual')
        predicted_arr = check_sample(predicted, 'predicted')
        mismatch = check_consistent_length(
            actual_arr, predicted_arr, names=('actual', 'predicted')
        )
        return cls(_actual=actual_arr, _predicted=predicted_arr, _mismatch=mismatch)

    @property
    def actual(self) -> NDArray[np.floating[Any]]:
        return self._actual

    @property
    def predicted(self) -> NDArray[np.floating[Any]]:
        return self._predicted

    @property
    def n(self) -> int:
        """Number of aligned pairs (0 when lengths disagree)."""
        if self._mismatch is not None:
            return 0
        return int(self._actual.shape[0])

    @property
    def degenerate_reason(self) -> str | None:
        if self._mismatch is not None:
            return self._mismatch
        if self._actual.shape[0] == 0:
            return "empty samples"
        return None

    def __repr__(self) -> str:
        if self._mismatch is not None:
            return f"ErrorDesign({self._mismatch})"
        return f"ErrorDesign(n={self.n})"
