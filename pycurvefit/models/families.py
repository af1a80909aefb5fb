"""
Model family specifications.

The family set is closed: five closed-form shapes plus the AUTOMATIC
sentinel, which names the selection mode and never labels a fit.

    LINEAR        y = m·x + b
    QUADRATIC     y = a·x² + b·x + c
    LOGARITHMIC   y = a·ln(x) + c        (x > 0)
    POWER         y = A·x^p              (x > 0, y > 0)
    EXPONENTIAL   y = A·r^x              (y > 0)
"""

from __future__ import annotations

from enum import Enum


class ModelFamily(Enum):
    """Closed enumeration of the fittable function families."""

    LINEAR = 'linear'
    QUADRATIC = 'quadratic'
    LOGARITHMIC = 'logarithmic'
    POWER = 'power'
    EXPONENTIAL = 'exponential'
    AUTOMATIC = 'automatic'

    @property
    def label(self) -> str:
        """Human-readable family name."""
        if self is ModelFamily.AUTOMATIC:
            return 'Automatic selection'
        return self.value.capitalize()

    @property
    def min_points(self) -> int:
        """Fewest samples the family can be fitted to."""
        return 3 if self is ModelFamily.QUADRATIC else 2

    @property
    def is_fit_family(self) -> bool:
        """False only for the AUTOMATIC selection sentinel."""
        return self is not ModelFamily.AUTOMATIC

    def __str__(self) -> str:
        return self.label


# Order in which the selector fits families; also the tie-break priority
FITTING_ORDER: tuple[ModelFamily, ...] = (
    ModelFamily.LINEAR,
    ModelFamily.LOGARITHMIC,
    ModelFamily.QUADRATIC,
    ModelFamily.EXPONENTIAL,
    ModelFamily.POWER,
)

_FAMILY_ALIASES: dict[str, ModelFamily] = {
    'auto': ModelFamily.AUTOMATIC,
    'log': ModelFamily.LOGARITHMIC,
    'exp': ModelFamily.EXPONENTIAL,
    'powerlaw': ModelFamily.POWER,
}


def resolve_family(family: str | ModelFamily) -> ModelFamily:
    """Resolve a family argument to a ModelFamily member.

    Args:
        family: Either a name ('linear', 'quadratic', 'logarithmic',
                'power', 'exponential', 'automatic', case-insensitive,
                short aliases 'log', 'exp', 'powerlaw', 'auto' accepted) or a
                ModelFamily (passed through).

    Returns:
        ModelFamily member.

    Raises:
        ValueError: If string name is not recognized.
        TypeError: If argument is neither string nor ModelFamily.
    """
    if isinstance(family, ModelFamily):
        return family
    if isinstance(family, str):
        key = family.strip().lower()
        if key in _FAMILY_ALIASES:
            return _FAMILY_ALIASES[key]
        try:
            return ModelFamily(key)
        except ValueError:
            valid = ', '.join(f.value for f in ModelFamily)
            raise ValueError(
                f"Unknown family: {family!r}. Valid families: {valid}"
            ) from None
    raise TypeError(f"family must be str or ModelFamily, got {type(family).__name__}")
