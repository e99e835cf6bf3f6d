"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a single sample and provides validation and metadata for the
describe() pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import check_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps a 1D sample of n observations. Unlike a regression design, an
    empty sample is accepted: every statistic then reports 0.0.

    Construction:
        DescriptiveDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike) -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. Lists, tuples, numpy arrays and pandas Series are
            accepted; a Series name is kept for display.
        """
        name = getattr(data, 'name', None)
        data_array = check_sample(data, 'data')
        return cls(
            _data=data_array,
            _n=int(data_array.shape[0]),
            _name=str(name) if name is not None else None,
        )

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The sample as a float64 array."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample name, or None if not available."""
        return self._name

    def __repr__(self) -> str:
        return f"DescriptiveDesign(n={self._n})"
