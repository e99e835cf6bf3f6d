"""
Error metrics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pynumerics.core.result import Result

if TYPE_CHECKING:
    from pynumerics.metrics.design import ErrorDesign


@dataclass(frozen=True)
class ErrorParams:
    """
    Parameter payload for pointwise error metrics.

    mape is expressed in percent and only averages over indices whose
    actual value is non-zero; n_mape is how many indices that was.
    """
    mae: float
    mse: float
    rmse: float
    mape: float
    n_mape: int = 0

    @classmethod
    def zero(cls) -> ErrorParams:
        return cls(mae=0.0, mse=0.0, rmse=0.0, mape=0.0, n_mape=0)


@dataclass
class ErrorSolution:
    """
    User-facing error metrics.

    Wraps Result[ErrorParams] and provides convenient accessors.
    """
    _result: Result[ErrorParams]
    _design: 'ErrorDesign'

    @property
    def mae(self) -> float:
        """Mean absolute error."""
        return self._result.params.mae

    @property
    def mse(self) -> float:
        """Mean squared error."""
        return self._result.params.mse

    @property
    def rmse(self) -> float:
        """Root mean squared error, sqrt(mse)."""
        return self._result.params.rmse

    @property
    def mape(self) -> float:
        """Mean absolute percentage error, in percent."""
        return self._result.params.mape

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def n_mape(self) -> int:
        """Number of indices with non-zero actual value used for MAPE."""
        return self._result.params.n_mape

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def as_dict(self) -> dict[str, float]:
        """The four metrics as plain floats."""
        return {
            'mae': self.mae,
            'mse': self.mse,
            'rmse': self.rmse,
            'mape': self.mape,
        }

    def summary(self) -> str:
        lines = [
            f"Error Metrics (n={self.n})",
            f"  MAE:   {self.mae:.6f}",
            f"  MSE:   {self.mse:.6f}",
            f"  RMSE:  {self.rmse:.6f}",
            f"  MAPE:  {self.mape:.4f}%  ({self.n_mape} of {self.n} points)",
        ]
        for w in self.warnings:
            lines.append(f"Note: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ErrorSolution(mae={self.mae:.6g}, rmse={self.rmse:.6g}, "
            f"mape={self.mape:.6g}, n={self.n})"
        )
