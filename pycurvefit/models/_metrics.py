"""
Goodness-of-fit statistics for a fitted curve.

R² here is 1 − SS_res/SS_tot clamped at 0, with the constant-sample
convention R² = 1 whenever SS_tot = 0. Any non-finite prediction marks
the fit as degenerate: R² = 0 and RMSE = ∞.
"""

from __future__ import annotations

from typing import NamedTuple
import numpy as np

from pycurvefit.models.design import SampleSet
from pycurvefit.models.solution import CurveParams, evaluate


class FitMetrics(NamedTuple):
    r_squared: float
    rmse: float


def compute_metrics(samples: SampleSet, params: CurveParams) -> FitMetrics:
    """
    Score params against the samples.

    Args:
        samples: The observed points
        params: Fitted coefficients to evaluate at samples.x

    Returns:
        FitMetrics(r_squared, rmse)
    """
    n = samples.n
    if n == 0:
        return FitMetrics(0.0, 0.0)

    y = samples.y
    y_hat = evaluate(params, samples.x)
    if not np.all(np.isfinite(y_hat)):
        return FitMetrics(0.0, float('inf'))

    residuals = y - y_hat
    ss_res = float(residuals @ residuals)
    deviations = y - float(np.mean(y))
    ss_tot = float(deviations @ deviations)

    # Note: ss_tot == 0 short-circuits to 1 even with residuals present
    if ss_tot == 0:
        r_squared = 1.0
    else:
        r_squared = max(0.0, 1.0 - ss_res / ss_tot)

    return FitMetrics(r_squared, float(np.sqrt(ss_res / n)))
