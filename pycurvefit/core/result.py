"""
Generic result container for pycurvefit solvers.

Every family solver returns a Result whose payload is that family's
parameter dataclass. FitResult wraps it with the scored, user-facing view.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (n, determinant, reason)
    - Immutable (frozen=True) so a fit can be shared or memoized freely
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single closed-form solve.

    Type Parameters:
        P: The family-specific parameter payload type

    Attributes:
        params: Fitted coefficients (or ZeroParams when not applicable)
        info: Structured metadata (n, determinant, reason, ...)
        method: Identifier of the solver that produced this result
        warnings: Non-fatal issues encountered during the solve

    Examples:
        >>> Result(
        ...     params=LinearParams(m=2.0, b=3.0),
        ...     info={'n': 4, 'denominator': 20.0},
        ...     method='ols_normal_equations',
        ... )
    """
    params: P
    info: dict[str, Any]
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
