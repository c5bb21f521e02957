"""
SDETools: Stochastic Differential Equation Tools

This package generates exact-distribution sample paths of stochastic
processes that have closed-form solutions, starting with the
Ornstein-Uhlenbeck process.
"""

__version__ = "1.0.0"
__author__ = "SDETools Contributors"

from .core.arguments import SDEArguments, sde_arguments
from .core.exceptions import (
    SDEToolsError,
    MissingArgument,
    InvalidOptions,
    InvalidParameterShape,
    NegativeParameter,
    InvalidTimeSpan,
    InvalidInitialCondition,
    RandomSourceFailure,
    RandomSourceShapeMismatch,
    RandomSourceArityMismatch,
    InconsistentPrecisionWarning,
)
from .core.options import SDEOptions, sdeset, sdeget
from .models.ornstein_uhlenbeck import generate_ornstein_uhlenbeck
from .utils.moments import ou_mean, ou_variance, sample_moments

__all__ = [
    "generate_ornstein_uhlenbeck",
    "SDEOptions",
    "sdeset",
    "sdeget",
    "sde_arguments",
    "SDEArguments",
    "ou_mean",
    "ou_variance",
    "sample_moments",
    "SDEToolsError",
    "MissingArgument",
    "InvalidOptions",
    "InvalidParameterShape",
    "NegativeParameter",
    "InvalidTimeSpan",
    "InvalidInitialCondition",
    "RandomSourceFailure",
    "RandomSourceShapeMismatch",
    "RandomSourceArityMismatch",
    "InconsistentPrecisionWarning",
]
