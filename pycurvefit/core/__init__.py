"""
Core infrastructure for pycurvefit.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Numeric thresholds for fitting and selection
"""

from pycurvefit.core.result import Result
from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.core.exceptions import (
    PyCurveFitError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Configuration
    "FitTolerances",
    "DEFAULT_TOLERANCES",
    # Exceptions
    "PyCurveFitError",
    "ValidationError",
    "DimensionError",
]
