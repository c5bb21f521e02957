"""
Argument handling shared by SDETools generators.

``sde_arguments`` turns the raw time vector, initial conditions and options
into validated arrays of a common precision and resolves which random source
produces the Wiener increments.
"""

import logging
from typing import Any, Callable, NamedTuple, Optional

import numpy as np

from .exceptions import InvalidInitialCondition, InvalidTimeSpan
from .options import as_options
from .random_source import CustomSource, NormalSource, default_rng

logger = logging.getLogger(__name__)


class SDEArguments(NamedTuple):
    """Normalized arguments consumed by SDE generators and solvers."""

    N: int
    tspan: np.ndarray
    tdir: int
    L: int
    y0: np.ndarray
    h: np.ndarray
    const_step: bool
    stratonovich: bool
    rand_fun: Callable[[int, int], np.ndarray]
    custom_rand_fun: bool


def as_real_vector(x: Any) -> Optional[np.ndarray]:
    """Return ``x`` as a 0-D/1-D real array, or None if it cannot be one."""
    try:
        arr = np.asarray(x)
    except (TypeError, ValueError):
        return None
    if arr.dtype == bool or not (
        np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)
    ):
        return None
    if arr.ndim > 1:
        return None
    return arr.reshape(-1)


def sde_arguments(
    solver: str,
    tspan: Any,
    y0: Any,
    options: Any = None,
    dtype: np.dtype = np.dtype(np.float64)
) -> SDEArguments:
    """
    Validate and normalize the arguments common to all SDE generators.

    Parameters
    ----------
    solver : str
        Name used in error messages
    tspan : array_like
        Monotonic vector of at least two sample times
    y0 : array_like
        Initial conditions, scalar or vector
    options : SDEOptions, mapping or None
        Option set selecting the random source
    dtype : np.dtype
        Floating point precision of the outputs

    Returns
    -------
    SDEArguments
    """
    opts = as_options(options)

    t = as_real_vector(tspan)
    if t is None or t.size < 2:
        raise InvalidTimeSpan(
            "The input argument TSPAN must be a vector of at least two real "
            "sample times.",
            solver,
        )
    t = t.astype(dtype)
    if not np.all(np.isfinite(t)):
        raise InvalidTimeSpan("TSPAN must contain only finite values.", solver)

    dt = np.diff(t)
    tdir = 1 if dt[0] > 0 else -1
    if not np.all(tdir * dt > 0):
        raise InvalidTimeSpan(
            "The entries in TSPAN must be strictly increasing or strictly "
            "decreasing.",
            solver,
        )
    h = tdir * dt
    const_step = bool(np.allclose(h, h[0], rtol=1e3 * np.finfo(dtype).eps, atol=0))

    y = as_real_vector(y0)
    if y is None or y.size == 0:
        raise InvalidInitialCondition(
            "Input argument Y0 must be a non-empty vector of real values.",
            solver,
        )
    y = y.astype(dtype)
    if not np.all(np.isfinite(y)):
        raise InvalidInitialCondition("Y0 must contain only finite values.", solver)

    if opts.rand_fun is not None:
        rand_fun = CustomSource(opts.rand_fun, solver)
        custom = True
    elif opts.rand_seed is not None:
        rand_fun = NormalSource(np.random.default_rng(opts.rand_seed))
        custom = False
    else:
        rand_fun = NormalSource(default_rng())
        custom = False

    logger.debug(
        "%s: N=%d, L=%d, tdir=%d, const_step=%s, custom_rand_fun=%s",
        solver, y.size, t.size, tdir, const_step, custom,
    )

    return SDEArguments(
        N=y.size,
        tspan=t,
        tdir=tdir,
        L=t.size,
        y0=y,
        h=h,
        const_step=const_step,
        stratonovich=opts.stratonovich,
        rand_fun=rand_fun,
        custom_rand_fun=custom,
    )
