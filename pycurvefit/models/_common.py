"""
Shared helpers for the family fitters.
"""

from __future__ import annotations

from pycurvefit.core.result import Result
from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily
from pycurvefit.models.solution import CurveParams, FitResult, ZeroParams
from pycurvefit.models._metrics import compute_metrics


def not_applicable_result(method: str, n: int, reason: str, **info) -> Result[CurveParams]:
    """Solver Result for a family whose preconditions failed."""
    return Result(
        params=ZeroParams(),
        info={'n': n, 'reason': reason, **info},
        method=method,
    )


def score(
    samples: SampleSet,
    result: Result[CurveParams],
    family: ModelFamily,
    formula: str,
) -> FitResult:
    """
    Wrap a solver Result as a FitResult.

    Applicable fits are scored against the original (untransformed)
    samples. Non-applicable fits get R² = 0, RMSE = 0 and no formula.
    """
    if isinstance(result.params, ZeroParams):
        return FitResult(
            _result=result,
            family=family,
            formula='',
            r_squared=0.0,
            rmse=0.0,
        )
    metrics = compute_metrics(samples, result.params)
    return FitResult(
        _result=result,
        family=family,
        formula=formula,
        r_squared=metrics.r_squared,
        rmse=metrics.rmse,
    )
