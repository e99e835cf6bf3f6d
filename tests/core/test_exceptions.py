"""
Tests for PyNumerics exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyNumericsError)
    - Diagnostic attributes on DimensionError
    - Validators raise the documented types
"""

import pytest

from pynumerics.core.exceptions import (
    DimensionError,
    PyNumericsError,
    ValidationError,
)
from pynumerics import mean, linear_regression


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyNumericsError."""

    def test_validation_error_is_pynumerics_error(self):
        with pytest.raises(PyNumericsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_dimension_error_is_pynumerics_error(self):
        with pytest.raises(PyNumericsError):
            raise DimensionError("wrong shape")


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries the parameter name and shape."""

    def test_all_attributes(self):
        err = DimensionError("x: expected 1D", name="x", shape=(3, 2))
        assert str(err) == "x: expected 1D"
        assert err.name == "x"
        assert err.shape == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.name is None
        assert err.shape is None

    def test_raised_by_public_api(self):
        with pytest.raises(DimensionError) as exc_info:
            linear_regression([[1, 2], [3, 4]], [1, 2])
        assert exc_info.value.name == "x"
        assert exc_info.value.shape == (2, 2)


class TestPublicApiRaises:
    """Uninterpretable input raises instead of returning a sentinel."""

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            mean(["a", "b"])

    def test_mixed_objects_rejected(self):
        with pytest.raises(ValidationError):
            mean([1.0, "two", None])
