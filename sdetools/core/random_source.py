"""
Sources of standard normal variates for Wiener increments.

A random source is any callable ``source(rows, cols)`` returning a
``rows x cols`` array of standard normal draws. The default source draws from
a ``numpy.random.Generator`` and is trusted; user-supplied sources are wrapped
in ``CustomSource`` and checked every time they are called.
"""

import inspect
import logging
import threading
import warnings
from typing import Any, Callable, Optional

import numpy as np

from .exceptions import (
    InconsistentPrecisionWarning,
    RandomSourceArityMismatch,
    RandomSourceFailure,
    RandomSourceShapeMismatch,
)

logger = logging.getLogger(__name__)

_default_rng: Optional[np.random.Generator] = None
_default_rng_lock = threading.Lock()


def default_rng() -> np.random.Generator:
    """Return the process-wide default stream, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        with _default_rng_lock:
            if _default_rng is None:
                _default_rng = np.random.default_rng()
                logger.debug("Created process-wide default random stream")
    return _default_rng


def reset_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the process-wide default stream with a freshly seeded one."""
    global _default_rng
    with _default_rng_lock:
        _default_rng = np.random.default_rng(seed)
        return _default_rng


class NormalSource:
    """Trusted source drawing standard normal variates from a Generator."""

    def __init__(self, generator: np.random.Generator):
        self.generator = generator

    def __call__(self, rows: int, cols: int) -> np.ndarray:
        return self.generator.standard_normal((rows, cols))

    def __repr__(self) -> str:
        return f"NormalSource({self.generator!r})"


class CustomSource:
    """
    Wraps a user-supplied random function and enforces its contract.

    The function must accept two positional arguments (rows, cols), must not
    require more, and must return a non-empty 2-D floating point array of
    exactly the requested shape. Each violation raises a distinct error.
    Exceptions raised inside the function itself propagate unchanged.

    Callables without an inspectable signature (many numpy builtins, such as
    ``Generator.standard_normal``) skip the arity check: a call they cannot
    handle raises their own error, not ``RandomSourceArityMismatch``. Their
    output is still validated. Wrap such functions in a lambda taking
    ``(rows, cols)``.
    """

    def __init__(self, func: Callable[..., Any], solver: Optional[str] = None):
        self.func = func
        self.solver = solver

    def _check_signature(self):
        try:
            signature = inspect.signature(self.func)
        except (TypeError, ValueError):
            # Some builtins expose no signature; their output is still checked.
            return

        params = list(signature.parameters.values())
        positional = [
            p for p in params
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        has_varargs = any(p.kind == p.VAR_POSITIONAL for p in params)
        if len(positional) < 2 and not has_varargs:
            raise RandomSourceArityMismatch(
                "RandFUN must have at least two inputs.",
                RandomSourceFailure.TOO_FEW_INPUTS,
                self.solver,
            )

        required = [
            p for p in params
            if p.default is p.empty
            and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        ]
        if len(required) > 2:
            raise RandomSourceArityMismatch(
                "RandFUN must not require more than two inputs.",
                RandomSourceFailure.TOO_MANY_INPUTS,
                self.solver,
            )

    def __call__(self, rows: int, cols: int) -> np.ndarray:
        self._check_signature()
        r = self.func(rows, cols)

        if r is None:
            raise RandomSourceArityMismatch(
                "The output of RandFUN was not specified. RandFUN must return "
                "a non-empty matrix.",
                RandomSourceFailure.NO_OUTPUT,
                self.solver,
            )

        r = np.asarray(r)
        if r.ndim != 2 or r.size == 0 or not np.issubdtype(r.dtype, np.floating):
            raise RandomSourceShapeMismatch(
                "RandFUN must return a non-empty matrix of floating point values.",
                RandomSourceFailure.NOT_FLOAT_MATRIX,
                self.solver,
            )
        if r.shape != (rows, cols):
            raise RandomSourceShapeMismatch(
                f"The specified alternative RandFUN did not output a {rows} by "
                f"{cols} matrix as requested (got {r.shape[0]} by {r.shape[1]}).",
                RandomSourceFailure.DIMENSION_MISMATCH,
                self.solver,
            )
        return r

    def __repr__(self) -> str:
        return f"CustomSource({self.func!r})"


def _is_weak(x: Any) -> bool:
    # Python scalars and sequences carry no precision of their own
    return not isinstance(x, (np.ndarray, np.generic))


def resolve_precision(*inputs: Any, names: Optional[list] = None) -> np.dtype:
    """
    Determine the dominant floating point precision of the inputs.

    Array inputs that are double precision or non-float make the result
    ``float64``; ``float32`` is returned only when every array input is single
    precision. Python scalars and lists adopt the precision of the array
    inputs (``float64`` if there are none). Mixing single and double array
    inputs emits an ``InconsistentPrecisionWarning``.
    """
    kinds = set()
    for x in inputs:
        if x is None or _is_weak(x):
            continue
        dtype = np.asarray(x).dtype
        kinds.add(np.float32 if dtype == np.float32 else np.float64)

    if not kinds:
        return np.dtype(np.float64)
    if len(kinds) > 1:
        label = ", ".join(names) if names else "inputs"
        warnings.warn(
            f"Mixture of single and double data for {label}.",
            InconsistentPrecisionWarning,
            stacklevel=3,
        )
        return np.dtype(np.float64)
    return np.dtype(kinds.pop())
