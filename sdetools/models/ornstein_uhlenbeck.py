"""
Ornstein-Uhlenbeck process, analytic solution.

This module generates exact-distribution sample paths of the system

    dY = theta*(mu - Y)*dt + sigma*dW

with diagonal noise, sampled at arbitrary monotonic times. The conditional
solution used, with tau = t - t0, is

    Y = Y0*exp(-theta*tau) + mu*(1 - exp(-theta*tau))
        + sigma*exp(-theta*tau)*W((exp(2*theta*tau) - 1)/(2*theta))

where W() is a standard Wiener process evaluated on a rescaled clock. The
clock reduces to tau when theta is zero, giving Y = Y0 + sigma*W(tau).

The diffusion term does not depend on the state, so the Ito and Stratonovich
interpretations coincide.

See Peter E. Kloeden and Eckhard Platen, "Numerical Solution of Stochastic
Differential Equations," Springer-Verlag, 1992.
"""

import logging
import warnings
from typing import Any, Optional, Tuple, Union

import numpy as np

from ..core.arguments import as_real_vector, sde_arguments
from ..core.exceptions import InvalidParameterShape, MissingArgument, NegativeParameter
from ..core.options import as_options, is_options
from ..core.random_source import resolve_precision

logger = logging.getLogger(__name__)

SOLVER = "SDE_OU"

_PARAMETER_NAMES = {
    "theta": ("drift rate", "THETA"),
    "mu": ("drift mean", "MU"),
    "sigma": ("diffusion", "SIG"),
}


def _parameter_vector(value: Any, name: str) -> np.ndarray:
    description, label = _PARAMETER_NAMES[name]
    vec = as_real_vector(value)
    if vec is None or vec.size == 0 or not np.all(np.isfinite(vec)):
        raise InvalidParameterShape(
            f"The {description} parameter, {label}, must be a non-empty vector "
            "of finite real values.",
            name,
            SOLVER,
        )
    return vec


def _check_length(vec: np.ndarray, name: str, N: int):
    if vec.size not in (1, N):
        description, label = _PARAMETER_NAMES[name]
        raise InvalidParameterShape(
            f"The {description} parameter, {label}, must be a scalar or a "
            f"vector the same length as Y0 ({N}), got length {vec.size}.",
            name,
            SOLVER,
        )


def generate_ornstein_uhlenbeck(
    theta: Any,
    mu: Any,
    sigma: Any,
    tspan: Any,
    y0: Any = None,
    options: Optional[Any] = None,
    return_wiener: bool = False
) -> Union[np.ndarray, Tuple[np.ndarray, np.ndarray]]:
    """
    Generate Ornstein-Uhlenbeck sample paths from the analytic solution.

    Parameters
    ----------
    theta : float or array_like
        Drift rate, scalar or vector of length N (non-negative)
    mu : float or array_like
        Drift mean, scalar or vector of length N
    sigma : float or array_like
        Diffusion, scalar or vector of length N (non-negative)
    tspan : array_like
        Sample times, strictly increasing or strictly decreasing, at least two
    y0 : float or array_like
        Initial conditions at tspan[0]; N = len(y0)
    options : SDEOptions or mapping, optional
        Options created with ``sdeset``. ``RandSeed`` creates a new stream
        instead of the default one; ``RandFUN`` replaces the normal generator.
    return_wiener : bool, optional
        Also return the integrated Wiener increments (default: False)

    Returns
    -------
    Y : np.ndarray
        Paths with shape (len(tspan), N); row i is the state at tspan[i]
    W : np.ndarray
        Only if return_wiener. Integrated, time-rescaled Wiener increments
        with shape (len(tspan), N); the first row is zero.

    Warns
    -----
    RuntimeWarning
        If the paths contain non-finite values. The rescaled clock
        exp(2*theta*|t - t0|) overflows once theta*|t - t0| exceeds about 350
        in double precision, so long spans with strong reversion are not
        representable.
    """
    if y0 is None or theta is None or mu is None or sigma is None or tspan is None:
        raise MissingArgument("Not enough input arguments.", SOLVER)
    if is_options(y0):
        raise MissingArgument(
            "An SDE options object was provided as the last argument, but one "
            "of the first four input arguments is missing.",
            SOLVER,
        )
    options = as_options(options)

    th = _parameter_vector(theta, "theta")
    m = _parameter_vector(mu, "mu")
    sig = _parameter_vector(sigma, "sigma")

    dtype = resolve_precision(
        theta, mu, sigma, tspan, y0,
        names=["THETA", "MU", "SIG", "TSPAN", "Y0"],
    )
    args = sde_arguments(SOLVER, tspan, y0, options, dtype)
    N, L = args.N, args.L

    _check_length(th, "theta", N)
    _check_length(m, "mu", N)
    _check_length(sig, "sigma", N)
    if np.any(th < 0):
        raise NegativeParameter(
            "The drift rate parameter, THETA, must be greater than or equal to zero.",
            "theta",
            SOLVER,
        )
    if np.any(sig < 0):
        raise NegativeParameter(
            "The diffusion parameter, SIG, must be greater than or equal to zero.",
            "sigma",
            SOLVER,
        )

    th = th.astype(dtype)
    m = m.astype(dtype)
    sig = sig.astype(dtype)

    Y, W = _assemble(args, th, m, sig, dtype, return_wiener)

    if not np.all(np.isfinite(Y)):
        warnings.warn(
            "Non-finite values in the Ornstein-Uhlenbeck paths; exp(2*THETA*|t - t0|) "
            "overflows once THETA*|t - t0| exceeds about 350 in double precision "
            "(about 44 in single precision).",
            RuntimeWarning,
            stacklevel=2,
        )
    if return_wiener:
        return Y, W
    return Y


def _assemble(args, th, m, sig, dtype, return_wiener):
    N, L = args.N, args.L

    # Column of elapsed times broadcasts against length-1 or length-N rows
    tau = (args.tspan - args.tspan[0])[:, np.newaxis]
    with np.errstate(over="ignore", invalid="ignore"):
        tt = -tau * th
        ett = np.exp(tt)
        Y = ett * args.y0 - np.expm1(tt) * m

    # Solution not a function of sigma, the random source is never touched
    if not np.any(sig != 0):
        logger.debug("%s: zero diffusion, no random draws", SOLVER)
        return Y, np.zeros((L, N), dtype=dtype) if return_wiener else None

    r = np.asarray(args.rand_fun(L - 1, N), dtype=dtype)

    with np.errstate(over="ignore", invalid="ignore"):
        # Rescaled clock (exp(2*theta*tau) - 1)/(2*theta), equal to tau at theta = 0
        drifting = th > 0
        rate = np.where(drifting, 2 * th, 1).astype(dtype)
        clock = np.where(drifting, np.expm1(-2 * tt) / rate, tau)
        tdir = args.tdir
        dW = tdir * np.sqrt(tdir * np.diff(clock, axis=0)) * r

        logger.debug("%s: generated %d samples of %d paths", SOLVER, L, N)

        # Only allocate W if requested as output
        if return_wiener:
            W = np.zeros((L, N), dtype=dtype)
            np.cumsum(dW, axis=0, out=W[1:])
            Y += ett * sig * W
            return Y, W

        Y[1:] += ett[1:] * sig * np.cumsum(dW, axis=0)
    return Y, None
