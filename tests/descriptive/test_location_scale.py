"""
Tests for mean, variance, standard deviation and median.
"""

import math

import numpy as np
import pytest

from pynumerics.core.compute.tolerances import REFERENCE
from pynumerics.descriptive import (
    describe,
    mean,
    median,
    std_dev,
    std_dev_with_mean,
    variance,
    variance_with_mean,
)


# ═══════════════════════════════════════════════════════════════════════
# Literal scenarios
# ═══════════════════════════════════════════════════════════════════════


class TestKnownValues:

    def test_one_to_five(self):
        data = [1, 2, 3, 4, 5]
        assert mean(data) == 3.0
        np.testing.assert_allclose(variance(data), 2.5, rtol=REFERENCE.rtol)
        np.testing.assert_allclose(std_dev(data), math.sqrt(2.5), rtol=REFERENCE.rtol)
        assert median(data) == 3.0

    def test_even_median(self):
        assert median([4, 1, 3, 2]) == 2.5

    def test_odd_unsorted_median(self):
        assert median([9, -1, 4]) == 4.0

    def test_returns_python_float(self):
        assert type(mean([1, 2])) is float
        assert type(variance([1, 2])) is float
        assert type(median([1, 2])) is float

    def test_matches_numpy(self, normal_sample):
        np.testing.assert_allclose(mean(normal_sample), np.mean(normal_sample), rtol=1e-12)
        np.testing.assert_allclose(
            variance(normal_sample), np.var(normal_sample, ddof=1), rtol=1e-12
        )
        np.testing.assert_allclose(median(normal_sample), np.median(normal_sample), rtol=1e-15)


# ═══════════════════════════════════════════════════════════════════════
# Degenerate input
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:
    """Too-small samples give 0.0, never an exception."""

    def test_empty(self):
        assert mean([]) == 0.0
        assert variance([]) == 0.0
        assert std_dev([]) == 0.0
        assert median([]) == 0.0
        assert variance_with_mean([], 1.0) == 0.0

    def test_single_value(self):
        assert mean([7.0]) == 7.0
        assert variance([7.0]) == 0.0
        assert std_dev([7.0]) == 0.0
        assert median([7.0]) == 7.0

    def test_constant_sample(self):
        assert variance([3.0] * 10) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Caller-supplied mean
# ═══════════════════════════════════════════════════════════════════════


class TestSuppliedMean:

    def test_agrees_with_computed_mean(self, normal_sample):
        m = mean(normal_sample)
        np.testing.assert_allclose(
            std_dev_with_mean(normal_sample, m), std_dev(normal_sample), rtol=1e-14
        )

    def test_mean_used_verbatim(self):
        """A wrong mean is not corrected: sum((x - 0)^2) / (n - 1)."""
        assert variance_with_mean([1.0, 2.0, 3.0], 0.0) == pytest.approx(7.0)
        assert std_dev_with_mean([1.0, 2.0, 3.0], 0.0) == pytest.approx(math.sqrt(7.0))


# ═══════════════════════════════════════════════════════════════════════
# Invariants
# ═══════════════════════════════════════════════════════════════════════


class TestInvariants:

    def test_std_dev_is_sqrt_variance_exactly(self, normal_sample):
        assert std_dev(normal_sample) == math.sqrt(variance(normal_sample))

    def test_every_std_dev_path_agrees_exactly(self, normal_sample):
        expected = math.sqrt(variance(normal_sample))
        assert std_dev_with_mean(normal_sample, mean(normal_sample)) == expected
        assert describe(normal_sample).sd == expected

    def test_translation_invariance(self, normal_sample):
        np.testing.assert_allclose(
            variance(normal_sample + 1000.0), variance(normal_sample), rtol=1e-9
        )

    def test_scale(self, normal_sample):
        np.testing.assert_allclose(
            variance(-3.0 * normal_sample), 9.0 * variance(normal_sample), rtol=1e-12
        )

    def test_median_permutation_invariant(self, rng, normal_sample):
        expected = median(normal_sample)
        assert median(normal_sample[::-1]) == expected
        assert median(rng.permutation(normal_sample)) == expected

    def test_input_not_mutated(self):
        data = np.array([3.0, 1.0, 2.0])
        median(data)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    def test_nan_propagates(self):
        assert math.isnan(mean([1.0, float('nan')]))
