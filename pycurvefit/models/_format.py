"""
Display formatting for fitted coefficients and formulas.

Everything here produces strings only. Numeric parameters and
predictions are never rounded by these helpers.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from pycurvefit.core.tolerances import FitTolerances, DEFAULT_TOLERANCES
from pycurvefit.models.solution import (
    LinearParams,
    QuadraticParams,
    LogarithmicParams,
    PowerParams,
    ExponentialParams,
)

_LOG2_SLOPE = 1.0 / math.log(2.0)
_LOG10_SLOPE = 1.0 / math.log(10.0)
# Enough digits that quantize never overflows the context for a float
_WIDE = Context(prec=400)


def format_number(value: float | None, precision: int = 2) -> str:
    """
    Render a coefficient as a compact numeral.

    Rules, in order:
        NaN or None              -> "?"
        +inf / -inf              -> "∞" / "-∞"
        |value| < 1e-4           -> "0"
        within 0.005 of integer  -> the integer, no decimal point
        otherwise                -> `precision` decimals, trailing zeros
                                    (and a bare trailing point) stripped

    Halves round away from zero, on the exact binary value of the float:
    format_number(2.5, 0) is "3", while 2.675 (stored just below
    2.675) gives "2.67".

    Examples:
        >>> format_number(2.999)
        '3'
        >>> format_number(0.00001)
        '0'
        >>> format_number(1.5)
        '1.5'
        >>> format_number(0.12345, 3)
        '0.123'
    """
    if value is None:
        return "?"
    value = float(value)
    if math.isnan(value):
        return "?"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if abs(value) < 1e-4:
        return "0"

    nearest = round(value)
    if abs(value - nearest) < 0.005:
        return str(int(nearest))

    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE)
    text = format(rounded, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return "0" if text == "-0" else text


def join_terms(
    terms: list[tuple[float, str]],
    sep: str = ' · ',
    unit_leading: bool = True,
) -> str:
    """
    Join (coefficient, symbol) terms into a sign-aware polynomial-style sum.

    Terms whose coefficient displays as 0 are dropped. When unit_leading
    is set and the first term's coefficient is exactly 1 or -1, that term
    is written as the bare symbol. Coefficient and symbol are joined by
    sep. An empty symbol marks the constant term. If every term drops
    out the result is "0".

        >>> join_terms([(2.0, 'x'), (-3.0, '')])
        '2 · x - 3'
        >>> join_terms([(1.0, 'x²'), (-3.0, 'x'), (0.0, '')], sep='·')
        'x² - 3·x'
    """
    parts: list[str] = []
    for i, (coef, symbol) in enumerate(terms):
        magnitude = format_number(abs(coef))
        if magnitude == "0":
            continue
        if not symbol:
            body = magnitude
        elif unit_leading and i == 0 and abs(coef) == 1.0:
            body = symbol
        else:
            body = f"{magnitude}{sep}{symbol}"

        if not parts:
            parts.append(body if coef > 0 else f"-{body}")
        else:
            parts.append(f"+ {body}" if coef > 0 else f"- {body}")
    return " ".join(parts) if parts else "0"


def render_linear(params: LinearParams) -> str:
    return "y = " + join_terms([(params.m, 'x'), (params.b, '')])


def render_quadratic(params: QuadraticParams) -> str:
    return "y = " + join_terms([
        (params.a, 'x²'),
        (params.b, 'x'),
        (params.c, ''),
    ], sep='·')


def render_logarithmic(
    params: LogarithmicParams,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> str:
    """
    Render y = a·ln(x) + c, naming the base when a matches one.

    a ≈ 1/ln(2) reads as log₂(x), a ≈ 1/ln(10) as log₁₀(x) and a ≈ 1
    as ln(x), each within tolerances.log_base_tolerance. Any other a,
    including -1, keeps its coefficient.
    """
    tol = tolerances.log_base_tolerance
    a = params.a
    if abs(a - _LOG2_SLOPE) < tol:
        head = (1.0, 'log₂(x)')
    elif abs(a - _LOG10_SLOPE) < tol:
        head = (1.0, 'log₁₀(x)')
    elif abs(a - 1.0) < tol:
        head = (1.0, 'ln(x)')
    else:
        return "y = " + join_terms([(a, 'ln(x)'), (params.c, '')], unit_leading=False)
    return "y = " + join_terms([head, (params.c, '')])


def render_power(params: PowerParams) -> str:
    return f"y = {format_number(params.A)} · x^({format_number(params.p)})"


def render_exponential(
    params: ExponentialParams,
    tolerances: FitTolerances = DEFAULT_TOLERANCES,
) -> str:
    """Render y = A·r^x; growth factors near 1 keep three decimals."""
    r = params.r
    if tolerances.near_unity_low <= r <= tolerances.near_unity_high:
        r_text = f"{r:.3f}"
    else:
        r_text = format_number(r)
    return f"y = {format_number(params.A)} · ({r_text})^x"
