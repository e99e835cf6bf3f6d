"""
Tests for the Backend protocol and tolerance tiers.
"""

import pytest

from pynumerics.core import Backend
from pynumerics.core.compute import (
    DENOMINATOR_FLOOR,
    MAPE_ACTUAL_FLOOR,
    STD_DEV_FLOOR,
)
from pynumerics.core.compute.tolerances import CPU_FP64, REFERENCE
from pynumerics.descriptive.backends import CPUDescriptiveBackend
from pynumerics.metrics.backends import CPUErrorBackend
from pynumerics.regression.backends import CPUNormalEquationsBackend


class TestBackendProtocol:

    @pytest.mark.parametrize("backend_cls", [
        CPUDescriptiveBackend,
        CPUNormalEquationsBackend,
        CPUErrorBackend,
    ])
    def test_cpu_backends_satisfy_protocol(self, backend_cls):
        backend = backend_cls()
        assert isinstance(backend, Backend)
        assert backend.name.startswith('cpu_')

    def test_plain_object_does_not(self):
        assert not isinstance(object(), Backend)


class TestTolerances:

    def test_degeneracy_floors(self):
        assert STD_DEV_FLOOR == 1e-10
        assert DENOMINATOR_FLOOR == 1e-10
        assert MAPE_ACTUAL_FLOOR == 1e-10

    def test_tiers_are_ordered(self):
        assert CPU_FP64.rtol < REFERENCE.rtol
        assert CPU_FP64.atol < REFERENCE.atol
