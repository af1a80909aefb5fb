"""
Fitters that reduce to linear least squares by a change of variables.

    family        model            transform          recovered coefficients
    -----------   --------------   ----------------   -------------------------
    LOGARITHMIC   y = a·ln(x) + c  (ln x, y)          a = m,       c = b
    POWER         y = A·x^p        (ln x, ln y)       p = m,       A = e^b
    EXPONENTIAL   y = A·r^x        (x, ln y)          r = e^m,     A = e^b

Least squares is done in the transformed space; R² and RMSE are always
computed against the original samples.
"""

from __future__ import annotations

import numpy as np

from pycurvefit.core.result import Result
from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily
from pycurvefit.models.solution import (
    CurveParams,
    FitResult,
    LinearParams,
    LogarithmicParams,
    PowerParams,
    ExponentialParams,
)
from pycurvefit.models._common import not_applicable_result, score
from pycurvefit.models._format import (
    render_logarithmic,
    render_power,
    render_exponential,
)
from pycurvefit.models._linear import solve_linear


def _exp(value: float) -> float:
    # Overflow gives inf, which the metrics treat as a degenerate fit
    with np.errstate(over='ignore'):
        return float(np.exp(value))


def _solve_transformed(
    samples: SampleSet,
    method: str,
    tolerances: FitTolerances,
    *,
    domain_ok: bool,
    domain_reason: str,
    fx=None,
    fy=None,
) -> Result[CurveParams]:
    """Check the domain, linearize and run the linear solver."""
    n = samples.n
    if n < 2:
        return not_applicable_result(
            method, n, f"fit requires at least 2 points, got {n}"
        )
    if not domain_ok:
        return not_applicable_result(method, n, domain_reason)

    inner = solve_linear(samples.transformed(fx=fx, fy=fy), tolerances)
    if not isinstance(inner.params, LinearParams):
        return not_applicable_result(
            method, n, f"linearized fit failed: {inner.info['reason']}"
        )
    return Result(
        params=inner.params,
        info={'n': n, 'denominator': inner.info['denominator']},
        method=method,
    )


def solve_logarithmic(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Result[CurveParams]:
    linear = _solve_transformed(
        samples, 'ols_log_x', tolerances,
        domain_ok=bool(np.all(samples.x > 0)),
        domain_reason="logarithmic fit requires every x > 0",
        fx=np.log,
    )
    if not isinstance(linear.params, LinearParams):
        return linear
    return Result(
        params=LogarithmicParams(a=linear.params.m, c=linear.params.b),
        info=linear.info,
        method=linear.method,
    )


def solve_power(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Result[CurveParams]:
    linear = _solve_transformed(
        samples, 'ols_log_log', tolerances,
        domain_ok=bool(np.all(samples.x > 0) and np.all(samples.y > 0)),
        domain_reason="power fit requires every x > 0 and every y > 0",
        fx=np.log,
        fy=np.log,
    )
    if not isinstance(linear.params, LinearParams):
        return linear
    return Result(
        params=PowerParams(A=_exp(linear.params.b), p=linear.params.m),
        info=linear.info,
        method=linear.method,
    )


def solve_exponential(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Result[CurveParams]:
    linear = _solve_transformed(
        samples, 'ols_log_y', tolerances,
        domain_ok=bool(np.all(samples.y > 0)),
        domain_reason="exponential fit requires every y > 0",
        fy=np.log,
    )
    if not isinstance(linear.params, LinearParams):
        return linear
    return Result(
        params=ExponentialParams(A=_exp(linear.params.b), r=_exp(linear.params.m)),
        info=linear.info,
        method=linear.method,
    )


def logarithmic_fit(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    result = solve_logarithmic(samples, tolerances)
    formula = ''
    if isinstance(result.params, LogarithmicParams):
        formula = render_logarithmic(result.params, tolerances)
    return score(samples, result, ModelFamily.LOGARITHMIC, formula)


def power_fit(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    result = solve_power(samples, tolerances)
    formula = ''
    if isinstance(result.params, PowerParams):
        formula = render_power(result.params)
    return score(samples, result, ModelFamily.POWER, formula)


def exponential_fit(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    result = solve_exponential(samples, tolerances)
    formula = ''
    if isinstance(result.params, ExponentialParams):
        formula = render_exponential(result.params, tolerances)
    return score(samples, result, ModelFamily.EXPONENTIAL, formula)
