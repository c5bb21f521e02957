"""
Exceptions and warnings raised by SDETools.

Every error derives from ``SDEToolsError`` and from the built-in exception
that matches its nature (``TypeError`` for call-contract problems,
``ValueError`` for bad values), so callers can catch either.
"""

from enum import Enum
from typing import Optional


class SDEToolsError(Exception):
    """Base class for all SDETools errors."""

    def __init__(self, message: str, solver: Optional[str] = None):
        if solver is not None:
            message = f"{message}  See {solver}."
        super().__init__(message)
        self.solver = solver


class MissingArgument(SDEToolsError, TypeError):
    """Fewer than the minimum required inputs were supplied."""


class InvalidOptions(SDEToolsError, TypeError):
    """The options object is malformed or holds invalid values."""


class InvalidParameterShape(SDEToolsError, ValueError):
    """
    A process parameter is not a non-empty finite real vector, or its length
    is neither 1 nor the state dimension.
    """

    def __init__(self, message: str, parameter: str, solver: Optional[str] = None):
        super().__init__(message, solver)
        self.parameter = parameter


class NegativeParameter(SDEToolsError, ValueError):
    """A parameter that must be non-negative has a negative entry."""

    def __init__(self, message: str, parameter: str, solver: Optional[str] = None):
        super().__init__(message, solver)
        self.parameter = parameter


class InvalidTimeSpan(SDEToolsError, ValueError):
    """The time vector is too short, non-finite or not monotonic."""


class InvalidInitialCondition(SDEToolsError, ValueError):
    """The initial condition vector is empty, non-finite or not real."""


class RandomSourceFailure(Enum):
    """Distinguishable ways a user-supplied random source can break its contract."""

    TOO_FEW_INPUTS = "too_few_inputs"
    TOO_MANY_INPUTS = "too_many_inputs"
    NO_OUTPUT = "no_output"
    NOT_FLOAT_MATRIX = "not_float_matrix"
    DIMENSION_MISMATCH = "dimension_mismatch"


class RandomSourceShapeMismatch(SDEToolsError, ValueError):
    """A custom random source returned the wrong rank, type or dimensions."""

    def __init__(
        self,
        message: str,
        reason: RandomSourceFailure,
        solver: Optional[str] = None
    ):
        super().__init__(message, solver)
        self.reason = reason


class RandomSourceArityMismatch(SDEToolsError, TypeError):
    """A custom random source has an incompatible signature or returned nothing."""

    def __init__(
        self,
        message: str,
        reason: RandomSourceFailure,
        solver: Optional[str] = None
    ):
        super().__init__(message, solver)
        self.reason = reason


class InconsistentPrecisionWarning(UserWarning):
    """Inputs mix single and double precision; the dominant precision is used."""
