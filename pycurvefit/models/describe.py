"""
Plain-language description of a fitted model.

Presentation text only: one template sentence per family with the
caller's axis names substituted. Nothing here inspects coefficients,
apart from spotting a named logarithm base in the rendered formula.
"""

from __future__ import annotations

from pycurvefit.models.families import ModelFamily
from pycurvefit.models.solution import FitResult

_TEMPLATES: dict[ModelFamily, str] = {
    ModelFamily.LINEAR: (
        'The data show a direct proportional relationship between "{x}" and "{y}". '
        'Each unit increase along the X axis changes the Y axis by a constant, '
        'predictable amount.'
    ),
    ModelFamily.QUADRATIC: (
        'The data follow a parabolic pattern. The change in "{y}" speeds up '
        '(or slows down) as "{x}" increases, a non-linear variation that traces '
        'a symmetric curve.'
    ),
    ModelFamily.LOGARITHMIC: (
        'It describes a quantity that grows quickly at first, while its rate of '
        'growth gradually slows until it levels off.'
    ),
    ModelFamily.EXPONENTIAL: (
        'It shows extremely rapid change. "{y}" is multiplied by a constant factor '
        'for every step in "{x}", producing accelerating growth or decay.'
    ),
    ModelFamily.POWER: (
        'The relationship follows a power law: "{y}" is proportional to a power of '
        '"{x}", as is common in physical scaling laws and volumes.'
    ),
}

_LOG_BASE_NOTES: tuple[tuple[str, str], ...] = (
    ('log₂', 'Each time X doubles, Y increases by one unit. '),
    ('log₁₀', 'Each time X is multiplied by 10, Y increases by one unit. '),
)


def describe_model(x_label: str, y_label: str, result: FitResult) -> str:
    """
    Describe a fit in one or two sentences.

    Args:
        x_label: Name of the X axis variable, e.g. "Distance"
        y_label: Name of the Y axis variable, e.g. "Cost"
        result: Fit to describe; only its family (and, for logarithmic
            fits, its formula) is consulted.

    Returns:
        Description beginning "This is a <family> function."

    Example:
        >>> describe_model("Distance", "Cost", fit_linear([(0, 5), (2, 9)]))
        'This is a linear function. The data show a direct proportional ...'
    """
    family = result.family
    base = f"This is a {family.label.lower()} function. "

    template = _TEMPLATES.get(family)
    if template is None:
        return base + (
            f"The data suggest a clear trend with an R² of {result.r_squared:.4f}."
        )

    detail = ''
    if family is ModelFamily.LOGARITHMIC:
        for marker, note in _LOG_BASE_NOTES:
            if marker in result.formula:
                detail = note
    return base + detail + template.format(x=x_label, y=y_label)
