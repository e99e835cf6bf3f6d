"""
Numerical thresholds and tolerance tiers.

The floors below decide when a denominator is treated as zero; crossing
one makes the guarded quantity return its 0.0 sentinel. They are part of
the observable contract and must not be tuned per call.

The tolerance tiers describe how closely results are expected to match
reference values, and are used by the test suite.
"""

from dataclasses import dataclass


# skewness/kurtosis return 0.0 when the supplied standard deviation is below this
STD_DEV_FLOOR = 1e-10

# linear_regression returns the zero fit when |n*Sxx - Sx^2| is below this
DENOMINATOR_FLOOR = 1e-10

# calculate_error skips indices with |actual| at or below this when computing MAPE
MAPE_ACTUAL_FLOOR = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form values (R, scipy): machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches reference implementations',
)

# Hand-computed literal scenarios
REFERENCE = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='reference',
    description='Literal expected values rounded to double precision',
)
