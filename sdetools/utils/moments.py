"""
Analytic moments of the Ornstein-Uhlenbeck process and sample statistics.
"""

import numpy as np
from typing import Tuple


def _elapsed(tspan) -> np.ndarray:
    t = np.asarray(tspan, dtype=float).reshape(-1)
    return (t - t[0])[:, np.newaxis]


def ou_mean(theta, mu, tspan, y0) -> np.ndarray:
    """
    Conditional mean of the OU process given Y(tspan[0]) = y0.

    E[Y(t)] = y0*exp(-theta*tau) + mu*(1 - exp(-theta*tau)), tau = t - t0

    Returns
    -------
    np.ndarray
        Mean with shape (len(tspan), N)
    """
    tt = -_elapsed(tspan) * np.atleast_1d(np.asarray(theta, dtype=float))
    y0 = np.atleast_1d(np.asarray(y0, dtype=float))
    mu = np.atleast_1d(np.asarray(mu, dtype=float))
    return np.exp(tt) * y0 - np.expm1(tt) * mu


def ou_variance(theta, sigma, tspan) -> np.ndarray:
    """
    Conditional variance of the OU process.

    Var[Y(t)] = sigma**2*(1 - exp(-2*theta*tau))/(2*theta), which tends to
    sigma**2*tau as theta goes to zero. For decreasing times (tau < 0) the
    magnitude is used, matching paths generated backwards in time.

    Returns
    -------
    np.ndarray
        Variance with shape (len(tspan), 1) or (len(tspan), N)
    """
    tau = _elapsed(tspan)
    theta = np.atleast_1d(np.asarray(theta, dtype=float))
    sigma = np.atleast_1d(np.asarray(sigma, dtype=float))
    drifting = theta > 0
    rate = np.where(drifting, 2 * theta, 1.0)
    spread = np.abs(np.where(drifting, -np.expm1(-rate * tau) / rate, tau))
    return sigma**2 * spread


def sample_moments(paths: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Mean and unbiased variance across paths (axis 1) at each sample time."""
    paths = np.asarray(paths)
    return paths.mean(axis=1), paths.var(axis=1, ddof=1)
