"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error.

Degenerate inputs (empty samples, mismatched pair lengths, near-zero
denominators) are NOT errors: the routines return zero sentinels for
those. Exceptions are reserved for input that cannot be interpreted at
all, such as non-numeric data or a sample with the wrong shape.
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be converted or are of the
    wrong kind (non-numeric arrays, unknown backend names, mixed
    str/bytes arguments).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional.

    Attributes:
        name: Parameter name of the offending array
        shape: Shape that was received
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.shape = shape
