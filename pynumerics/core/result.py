"""
Generic result container for all PyNumerics computations.

The Result class provides a standardized envelope that the compound
routines (describe, linear_regression, calculate_error) use. Domains
define their own parameter payloads; the envelope carries the metadata
that is common to all of them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, degenerate reason)
    - timing is optional (don't burden unit tests)
    - warnings record sentinel decisions instead of raising
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata stamped onto every result."""
    from pynumerics import __version__

    return {
        'pynumerics_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (slope, metrics, moments, etc.)
        info: Structured metadata (method, degenerate reason)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'normal_equations'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_normal_equations'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
