"""
Fit solution types.

Contains the per-family parameter payloads, the single evaluate()
dispatch over them, and the user-facing FitResult wrapper.

Each payload is a frozen dataclass holding only coefficients; a fit
never stores a callable or a reference back to its samples.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.result import Result
from pycurvefit.models.families import ModelFamily


@dataclass(frozen=True)
class LinearParams:
    """y = m·x + b"""
    m: float
    b: float


@dataclass(frozen=True)
class QuadraticParams:
    """y = a·x² + b·x + c"""
    a: float
    b: float
    c: float


@dataclass(frozen=True)
class LogarithmicParams:
    """y = a·ln(x) + c"""
    a: float
    c: float


@dataclass(frozen=True)
class PowerParams:
    """y = A·x^p"""
    A: float
    p: float


@dataclass(frozen=True)
class ExponentialParams:
    """y = A·r^x"""
    A: float
    r: float


@dataclass(frozen=True)
class ZeroParams:
    """Payload of a non-applicable fit. Predicts 0 everywhere."""


CurveParams = Union[
    LinearParams,
    QuadraticParams,
    LogarithmicParams,
    PowerParams,
    ExponentialParams,
    ZeroParams,
]


def params_as_dict(params: CurveParams) -> dict[str, float]:
    """Coefficient name -> value. Empty for ZeroParams."""
    return {f.name: float(getattr(params, f.name)) for f in fields(params)}


def evaluate(params: CurveParams, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Evaluate the fitted curve described by params at x.

    Out-of-domain inputs (ln of a non-positive x, a negative base raised
    to a fractional power, overflow) give NaN or ±Inf rather than raising.

    Args:
        params: Any CurveParams payload
        x: Scalar or array of abscissae

    Returns:
        float for scalar x, otherwise an array shaped like x
    """
    x_arr = np.asarray(x, dtype=np.float64)

    with np.errstate(all='ignore'):
        if isinstance(params, LinearParams):
            y = params.m * x_arr + params.b
        elif isinstance(params, QuadraticParams):
            y = params.a * x_arr ** 2 + params.b * x_arr + params.c
        elif isinstance(params, LogarithmicParams):
            y = params.a * np.log(x_arr) + params.c
        elif isinstance(params, PowerParams):
            y = params.A * np.power(x_arr, params.p)
        elif isinstance(params, ExponentialParams):
            y = params.A * np.power(params.r, x_arr)
        elif isinstance(params, ZeroParams):
            y = np.zeros_like(x_arr)
        else:
            raise TypeError(f"Unknown parameter payload: {type(params).__name__}")

    if y.ndim == 0:
        return float(y)
    return y


@dataclass(frozen=True)
class FitResult:
    """
    Result of fitting one model family to one sample set.

    Wraps the solver's Result and adds the scored, rendered view used
    by callers: formula, R² and RMSE.

    Instances compare by value but are not hashable: the diagnostics
    in info are a plain dict.
    """
    __hash__ = None  # type: ignore[assignment]

    _result: Result[CurveParams]
    family: ModelFamily
    formula: str
    r_squared: float
    rmse: float

    @property
    def params(self) -> CurveParams:
        """Typed coefficient payload."""
        return self._result.params

    @property
    def parameters(self) -> dict[str, float]:
        """Coefficient name -> fitted value (a fresh dict on each access)."""
        return params_as_dict(self._result.params)

    @property
    def is_applicable(self) -> bool:
        return not isinstance(self._result.params, ZeroParams)

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """Predicted y at x (scalar or array)."""
        return evaluate(self._result.params, x)

    def __call__(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        return self.predict(x)

    def summary(self) -> str:
        """Generate a plain-text report of the fit."""
        lines = [
            f"{self.family.label} Fit Results",
            "=" * 48,
            f"Applicable: {'yes' if self.is_applicable else 'no'}",
        ]
        if not self.is_applicable:
            reason = self.info.get('reason')
            if reason:
                lines.append(f"Reason: {reason}")
        else:
            lines.extend([
                f"Formula: {self.formula}",
                f"R-squared: {self.r_squared:.6f}",
                f"RMSE: {self.rmse:.6g}",
                "",
                "Parameters:",
                "-" * 48,
            ])
            for name, value in self.parameters.items():
                lines.append(f"  {name:<4} {value:16.8g}")
            lines.append("-" * 48)
        lines.append(f"Method: {self.method}")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        if not self.is_applicable:
            return f"FitResult(family={self.family.value}, applicable=False)"
        return (
            f"FitResult(family={self.family.value}, formula={self.formula!r}, "
            f"r_squared={self.r_squared:.4f})"
        )
