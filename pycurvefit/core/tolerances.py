"""
Numeric thresholds used by the fitters and the model selector.

Collected in one frozen dataclass so callers can override a threshold
for a single call without touching module state:

    >>> from dataclasses import replace
    >>> strict = replace(DEFAULT_TOLERANCES, early_exit_r_squared=0.99999)
    >>> select_best_model(points, tolerances=strict)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FitTolerances:
    """Threshold specification for fitting and selection."""
    # |n·Σx² − (Σx)²| and |det| below this mean the normal equations are singular
    singular_epsilon: float = 1e-12
    # |a| below this and the quadratic collapses to the linear fit
    curvature_epsilon: float = 1e-4
    # Linear fit with R² above this is returned without trying other families
    early_exit_r_squared: float = 0.999
    # Candidates this close to the best R² are ranked by fitting order
    tie_tolerance: float = 0.001
    # Distance from 1/ln(2), 1/ln(10) and 1 for named logarithm bases
    log_base_tolerance: float = 0.01
    # Growth factors inside [low, high] are displayed with 3 decimals
    near_unity_low: float = 0.99
    near_unity_high: float = 1.01

    def __post_init__(self) -> None:
        for name in ('singular_epsilon', 'curvature_epsilon', 'tie_tolerance',
                     'log_base_tolerance'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if not 0.0 <= self.early_exit_r_squared <= 1.0:
            raise ValueError(
                f"early_exit_r_squared must be in [0, 1], got {self.early_exit_r_squared}"
            )
        if self.near_unity_low > self.near_unity_high:
            raise ValueError(
                f"near_unity_low ({self.near_unity_low}) exceeds "
                f"near_unity_high ({self.near_unity_high})"
            )


DEFAULT_TOLERANCES = FitTolerances()
