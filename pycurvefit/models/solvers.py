"""
Solver dispatch for curve fitting.

This module provides the public fitting API:
    fit()                fit one named family, or select automatically
    fit_linear() ...     one function per family
    fit_all()            every family, in fitting order
    rank_models()        applicable fits, best first
    select_best_model()  the single best-explaining fit
    curve_points()       sample a fitted curve for plotting
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterable, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.exceptions import ValidationError
from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.models.design import SampleSet
from pycurvefit.models.families import ModelFamily, FITTING_ORDER, resolve_family
from pycurvefit.models.solution import FitResult
from pycurvefit.models._linear import linear_fit
from pycurvefit.models._quadratic import quadratic_fit
from pycurvefit.models._linearized import logarithmic_fit, power_fit, exponential_fit

logger = logging.getLogger(__name__)

PointsLike = Union[SampleSet, Iterable[tuple[float, float]], ArrayLike]

_FITTERS: dict[ModelFamily, Callable[[SampleSet, FitTolerances], FitResult]] = {
    ModelFamily.LINEAR: linear_fit,
    ModelFamily.QUADRATIC: quadratic_fit,
    ModelFamily.LOGARITHMIC: logarithmic_fit,
    ModelFamily.POWER: power_fit,
    ModelFamily.EXPONENTIAL: exponential_fit,
}


def _ensure_samples(points: PointsLike) -> SampleSet:
    """Convert raw points to a SampleSet if needed."""
    if isinstance(points, SampleSet):
        return points
    return SampleSet.from_points(points)


def fit(
    points: PointsLike,
    family: str | ModelFamily = ModelFamily.AUTOMATIC,
    *,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    """
    Fit a model family to sample points.

    Args:
        points: SampleSet, sequence of (x, y) pairs, or (n, 2) array
        family: Family to fit. AUTOMATIC (the default) delegates to
            select_best_model().
        tolerances: Numeric thresholds

    Returns:
        FitResult for the requested family. Families whose preconditions
        fail come back with is_applicable=False rather than raising.

    Raises:
        ValidationError: If points are malformed
        ValueError: If family is not a known name

    Example:
        >>> result = fit([(0, 3), (1, 5), (2, 7), (3, 9)], 'linear')
        >>> result.formula
        'y = 2 · x + 3'
    """
    resolved = resolve_family(family)
    samples = _ensure_samples(points)
    if resolved is ModelFamily.AUTOMATIC:
        return select_best_model(samples, tolerances=tolerances)
    return _FITTERS[resolved](samples, tolerances)


def fit_linear(points: PointsLike, *, tolerances: FitTolerances = DEFAULT_TOLERANCES) -> FitResult:
    """Fit y = m·x + b."""
    return linear_fit(_ensure_samples(points), tolerances)


def fit_quadratic(points: PointsLike, *, tolerances: FitTolerances = DEFAULT_TOLERANCES) -> FitResult:
    """Fit y = a·x² + b·x + c (needs at least 3 points)."""
    return quadratic_fit(_ensure_samples(points), tolerances)


def fit_logarithmic(points: PointsLike, *, tolerances: FitTolerances = DEFAULT_TOLERANCES) -> FitResult:
    """Fit y = a·ln(x) + c (needs every x > 0)."""
    return logarithmic_fit(_ensure_samples(points), tolerances)


def fit_power(points: PointsLike, *, tolerances: FitTolerances = DEFAULT_TOLERANCES) -> FitResult:
    """Fit y = A·x^p (needs every x > 0 and y > 0)."""
    return power_fit(_ensure_samples(points), tolerances)


def fit_exponential(points: PointsLike, *, tolerances: FitTolerances = DEFAULT_TOLERANCES) -> FitResult:
    """Fit y = A·r^x (needs every y > 0)."""
    return exponential_fit(_ensure_samples(points), tolerances)


def fit_all(
    points: PointsLike,
    *,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> tuple[FitResult, ...]:
    """
    Fit every family.

    Returns:
        One FitResult per family in fitting order (linear, logarithmic,
        quadratic, exponential, power), applicable or not.
    """
    samples = _ensure_samples(points)
    return tuple(_FITTERS[family](samples, tolerances) for family in FITTING_ORDER)


def _rank(candidates: list[FitResult], tie_tolerance: float) -> list[FitResult]:
    """
    Order candidates best first.

    Fits whose R² is within tie_tolerance of the best are considered
    equal and keep their fitting order at the head of the list; the
    rest follow by descending R². Python's sort is stable, so equal
    R² values also keep fitting order.
    """
    best = max(c.r_squared for c in candidates)
    tied = [c for c in candidates if best - c.r_squared < tie_tolerance]
    rest = sorted(
        (c for c in candidates if best - c.r_squared >= tie_tolerance),
        key=lambda c: c.r_squared,
        reverse=True,
    )
    return tied + rest


def rank_models(
    points: PointsLike,
    *,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> list[FitResult]:
    """
    Fit every family and rank the applicable ones.

    Non-applicable fits and fits with a non-finite R² are dropped.
    Ties (R² within tolerances.tie_tolerance of the best) are broken by
    fitting order.

    Returns:
        Applicable FitResults, best first. Empty if none apply.
    """
    candidates = [
        r for r in fit_all(points, tolerances=tolerances)
        if r.is_applicable and math.isfinite(r.r_squared)
    ]
    if not candidates:
        return []
    return _rank(candidates, tolerances.tie_tolerance)


def select_best_model(
    points: PointsLike,
    *,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> FitResult:
    """
    Return the single fit judged to best explain the points.

    Algorithm:
        1. Fewer than 2 points: the (non-applicable) linear fit.
        2. Linear fit with R² > tolerances.early_exit_r_squared: returned
           as is, without trying the other families.
        3. Otherwise every family is fitted and ranked by rank_models().
        4. If nothing is applicable, the linear fit is returned anyway.

    Never raises for inapplicable data; only malformed input raises
    ValidationError.

    Example:
        >>> best = select_best_model([(-2, 4), (-1, 1), (0, 0), (1, 1), (2, 4)])
        >>> best.family, best.formula
        (<ModelFamily.QUADRATIC: 'quadratic'>, 'y = x²')
    """
    samples = _ensure_samples(points)
    linear = linear_fit(samples, tolerances)

    if samples.n < 2:
        logger.debug("select_best_model: %d point(s), returning empty linear fit", samples.n)
        return linear

    if linear.is_applicable and linear.r_squared > tolerances.early_exit_r_squared:
        logger.debug(
            "select_best_model: linear R²=%.6f above %.4g, skipping other families",
            linear.r_squared, tolerances.early_exit_r_squared,
        )
        return linear

    ranked = rank_models(samples, tolerances=tolerances)
    if not ranked:
        logger.debug("select_best_model: no applicable family, falling back to linear")
        return linear

    logger.debug(
        "select_best_model: ranking %s",
        ", ".join(f"{r.family.value}={r.r_squared:.6f}" for r in ranked),
    )
    return ranked[0]


def curve_points(
    result: FitResult,
    x_min: float,
    x_max: float,
    steps: int = 100,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Sample a fitted curve on an evenly spaced grid, for plotting.

    The grid has steps + 1 abscissae from x_min to x_max inclusive.
    Abscissae x <= 0 are skipped for logarithmic and power fits, and
    any point whose prediction is not finite is dropped.

    Returns:
        (xs, ys) arrays of equal length

    Raises:
        ValidationError: If the range is not finite or reversed, or
            steps is not a finite integer >= 1
    """
    if not (math.isfinite(x_min) and math.isfinite(x_max)):
        raise ValidationError(f"curve range must be finite, got [{x_min}, {x_max}]")
    if x_min > x_max:
        raise ValidationError(f"x_min ({x_min}) must not exceed x_max ({x_max})")
    if not math.isfinite(steps) or int(steps) != steps or steps < 1:
        raise ValidationError(f"steps must be a positive integer, got {steps}")

    xs = np.linspace(x_min, x_max, int(steps) + 1)
    if result.family in (ModelFamily.LOGARITHMIC, ModelFamily.POWER):
        xs = xs[xs > 0]
    ys = np.asarray(result.predict(xs), dtype=np.float64)
    finite = np.isfinite(ys)
    return xs[finite], ys[finite]
