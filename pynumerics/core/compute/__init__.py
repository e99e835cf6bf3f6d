"""
Shared compute infrastructure for PyNumerics.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Degeneracy thresholds and tolerance tiers
"""

from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import (
    DENOMINATOR_FLOOR,
    MAPE_ACTUAL_FLOOR,
    STD_DEV_FLOOR,
    ToleranceTier,
)

__all__ = [
    # Timing
    "Timer",
    # Thresholds
    "DENOMINATOR_FLOOR",
    "MAPE_ACTUAL_FLOOR",
    "STD_DEV_FLOOR",
    "ToleranceTier",
]
