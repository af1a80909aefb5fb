"""
pycurvefit: automatic curve fitting for small (x, y) sample sets.

Fits linear, quadratic, logarithmic, power and exponential models in
closed form, scores them and selects the best explanation.

Submodules:
    models: Family fitters, model selection, descriptions
    core: Exceptions, validation, result envelope, tolerances
"""

__version__ = "0.1.0"

from pycurvefit import models
from pycurvefit.models import (
    select_best_model,
    describe_model,
    fit,
    FitResult,
    ModelFamily,
    SampleSet,
)

__all__ = [
    "__version__",
    "models",
    "select_best_model",
    "describe_model",
    "fit",
    "FitResult",
    "ModelFamily",
    "SampleSet",
]
