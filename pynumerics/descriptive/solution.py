"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pynumerics.core.result import Result

if TYPE_CHECKING:
    from pynumerics.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Every field is a plain float. Statistics that are undefined for the
    sample size (or for a constant sample) hold 0.0.
    """
    n: int
    mean: float
    variance: float
    sd: float
    median: float
    skewness: float
    kurtosis: float
    minimum: float
    maximum: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def skewness(self) -> float:
        """Bias-adjusted skewness g1."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Sample-adjusted excess kurtosis G2."""
        return self._result.params.kurtosis

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample name from the design."""
        return self._design.name

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
        """Return every statistic keyed by name."""
        p = self._result.params
        return {
            'n': p.n,
            'mean': p.mean,
            'variance': p.variance,
            'sd': p.sd,
            'median': p.median,
            'skewness': p.skewness,
            'kurtosis': p.kurtosis,
            'minimum': p.minimum,
            'maximum': p.maximum,
        }

    def summary(self) -> str:
        """Two-column text table of all statistics."""
        rows = [
            ("n", str(self.n)),
            ("Mean", f"{self.mean:.6f}"),
            ("Variance", f"{self.variance:.6f}"),
            ("Std. Dev.", f"{self.sd:.6f}"),
            ("Median", f"{self.median:.6f}"),
            ("Skewness", f"{self.skewness:.6f}"),
            ("Kurtosis", f"{self.kurtosis:.6f}"),
            ("Min.", f"{self.minimum:.6f}"),
            ("Max.", f"{self.maximum:.6f}"),
        ]
        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = [f"Descriptive Statistics: {self.name or 'data'}"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for w in self.warnings:
            lines.append(f"Note: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g})"
        )
