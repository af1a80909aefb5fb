"""
Ordinary least squares for y = m·x + b.

Solved in closed form from the 2×2 normal equations:

    m = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
    b = (Σy − m·Σx) / n

solve_linear() works on any SampleSet, raw or linearized, so the
logarithmic, power and exponential fitters all reuse it.
"""

from __future__ import annotations

from pycurvefit.core.result import Result
from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily
from pycurvefit.models.solution import CurveParams, FitResult, LinearParams
from pycurvefit.models._common import not_applicable_result, score
from pycurvefit.models._format import render_linear

METHOD = 'ols_normal_equations'


def solve_linear(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Result[CurveParams]:
    """
    Solve the linear normal equations.

    Returns:
        Result with LinearParams, or ZeroParams when there are fewer
        than two points or the denominator vanishes (x does not vary).
    """
    n = samples.n
    if n < 2:
        return not_applicable_result(
            METHOD, n, f"linear fit requires at least 2 points, got {n}"
        )

    x, y = samples.x, samples.y
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float(x @ y)
    sum_x2 = float(x @ x)

    denominator = n * sum_x2 - sum_x * sum_x
    if abs(denominator) < tolerances.singular_epsilon:
        return not_applicable_result(
            METHOD, n, "normal equations are singular: x values do not vary",
            denominator=denominator,
        )

    m = (n * sum_xy - sum_x * sum_y) / denominator
    b = (sum_y - m * sum_x) / n

    return Result(
        params=LinearParams(m=m, b=b),
        info={'n': n, 'denominator': denominator},
        method=METHOD,
    )


def linear_fit(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    result = solve_linear(samples, tolerances)
    formula = ''
    if isinstance(result.params, LinearParams):
        formula = render_linear(result.params)
    return score(samples, result, ModelFamily.LINEAR, formula)
