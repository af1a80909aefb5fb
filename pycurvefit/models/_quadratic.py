"""
Least squares for y = a·x² + b·x + c via Cramer's rule.

The 3×3 normal equations

    | n    Σx   Σx² | |c|   | Σy   |
    | Σx   Σx²  Σx³ | |b| = | Σxy  |
    | Σx²  Σx³  Σx⁴ | |a|   | Σx²y |

are solved by ratios of determinants. A fitted |a| below the curvature
tolerance is treated as no curvature at all: the linear fit is returned
in its place, still labelled QUADRATIC.
"""

from __future__ import annotations

from dataclasses import replace

from pycurvefit.core.result import Result
from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily
from pycurvefit.models.solution import (
    CurveParams,
    FitResult,
    LinearParams,
    QuadraticParams,
)
from pycurvefit.models._common import not_applicable_result, score
from pycurvefit.models._format import render_linear, render_quadratic
from pycurvefit.models._linear import solve_linear

METHOD = 'cramer_normal_equations'


def det3(
    a: float, b: float, c: float,
    d: float, e: float, f: float,
    g: float, h: float, i: float,
) -> float:
    """Determinant of the row-major 3×3 matrix [[a, b, c], [d, e, f], [g, h, i]]."""
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def solve_quadratic(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> Result[CurveParams]:
    """
    Solve the quadratic normal equations.

    Returns:
        Result with QuadraticParams, ZeroParams for fewer than three
        points or a singular system, or the linear solve (carrying a
        warning) when the curvature term is negligible.
    """
    n = samples.n
    if n < 3:
        return not_applicable_result(
            METHOD, n, f"quadratic fit requires at least 3 points, got {n}"
        )

    x, y = samples.x, samples.y
    x2 = x * x
    sx = float(x.sum())
    sx2 = float(x2.sum())
    sx3 = float((x2 * x).sum())
    sx4 = float((x2 * x2).sum())
    sy = float(y.sum())
    sxy = float(x @ y)
    sx2y = float(x2 @ y)

    D = det3(n, sx, sx2, sx, sx2, sx3, sx2, sx3, sx4)
    if abs(D) < tolerances.singular_epsilon:
        return not_applicable_result(
            METHOD, n,
            "normal equations are singular: fewer than 3 distinct x values",
            determinant=D,
        )

    Dc = det3(sy, sx, sx2, sxy, sx2, sx3, sx2y, sx3, sx4)
    Db = det3(n, sy, sx2, sx, sxy, sx3, sx2, sx2y, sx4)
    Da = det3(n, sx, sy, sx, sx2, sxy, sx2, sx3, sx2y)

    a = Da / D
    b = Db / D
    c = Dc / D

    if abs(a) < tolerances.curvature_epsilon:
        linear = solve_linear(samples, tolerances)
        return replace(
            linear,
            info={**linear.info, 'determinant': D, 'discarded_a': a},
            warnings=linear.warnings + (
                f"quadratic term |a| = {abs(a):.3g} is negligible; using the linear fit",
            ),
        )

    return Result(
        params=QuadraticParams(a=a, b=b, c=c),
        info={'n': n, 'determinant': D},
        method=METHOD,
    )


def quadratic_fit(
    samples: SampleSet,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    result = solve_quadratic(samples, tolerances)
    params = result.params
    formula = ''
    if isinstance(params, QuadraticParams):
        formula = render_quadratic(params)
    elif isinstance(params, LinearParams):
        formula = render_linear(params)
    return score(samples, result, ModelFamily.QUADRATIC, formula)
