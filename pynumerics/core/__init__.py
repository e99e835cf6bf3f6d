"""
Core infrastructure for PyNumerics.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, regression, metrics, ...).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, degeneracy thresholds, tolerance tiers
"""

from pynumerics.core.protocols import Backend
from pynumerics.core.result import Result
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
]
