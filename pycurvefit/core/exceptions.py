"""
Exception hierarchy for pycurvefit.

All exceptions inherit from PyCurveFitError to allow catching any
library-specific error.

Design principles:
    - Only malformed input raises. A family whose domain preconditions are
      not met is reported as a non-applicable FitResult, never an exception.
    - Error messages are actionable with actual vs expected values
"""


class PyCurveFitError(Exception):
    """Base exception for all pycurvefit errors."""
    pass


class ValidationError(PyCurveFitError):
    """
    Input validation failed.

    Raised when user-provided sample data cannot be interpreted as
    finite real (x, y) pairs.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when point input is not (n, 2) shaped or when x and y
    arrays have different lengths.

    Attributes:
        shape: The offending shape, if available
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape
