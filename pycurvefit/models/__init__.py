"""
Closed-form curve fitting and automatic model selection.

Fits five function families by least squares (linear, quadratic,
logarithmic, power, exponential), scores each with R² and RMSE, and
picks the one that best explains a small set of (x, y) points.

Public API:
    select_best_model(points) -> FitResult
    describe_model(x_label, y_label, result) -> str
    fit(points, family) -> FitResult
    fit_all(points) / rank_models(points)
    curve_points(result, x_min, x_max)

Example:
    >>> from pycurvefit.models import select_best_model, describe_model
    >>> best = select_best_model([(0, 3), (1, 5), (2, 7), (3, 9)])
    >>> print(best.formula)
    y = 2 · x + 3
    >>> print(describe_model("Time", "Distance", best))
"""

from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily, FITTING_ORDER, resolve_family
from pycurvefit.models.solution import (
    FitResult,
    CurveParams,
    LinearParams,
    QuadraticParams,
    LogarithmicParams,
    PowerParams,
    ExponentialParams,
    ZeroParams,
    evaluate,
)
from pycurvefit.models._format import format_number
from pycurvefit.models._metrics import FitMetrics, compute_metrics
from pycurvefit.models.solvers import (
    fit,
    fit_linear,
    fit_quadratic,
    fit_logarithmic,
    fit_power,
    fit_exponential,
    fit_all,
    rank_models,
    select_best_model,
    curve_points,
)
from pycurvefit.models.describe import describe_model

__all__ = [
    "select_best_model",
    "describe_model",
    "fit",
    "fit_linear",
    "fit_quadratic",
    "fit_logarithmic",
    "fit_power",
    "fit_exponential",
    "fit_all",
    "rank_models",
    "curve_points",
    "format_number",
    "compute_metrics",
    "evaluate",
    "SampleSet",
    "ModelFamily",
    "FITTING_ORDER",
    "resolve_family",
    "FitResult",
    "FitMetrics",
    "CurveParams",
    "LinearParams",
    "QuadraticParams",
    "LogarithmicParams",
    "PowerParams",
    "ExponentialParams",
    "ZeroParams",
]
