"""
Command-line generator for Ornstein-Uhlenbeck sample paths.

Example
-------
    sdetools-ou --theta 4 --mu 0 --sigma 0.25 --y0 -1 0 1 --SEED 1 \
        --DATA_SAVE_PATH paths.npy
"""

import logging
import os
import sys

import numpy as np

from .config import logprint, parse_args, setup_logging
from .core.exceptions import SDEToolsError
from .core.options import sdeset
from .models.ornstein_uhlenbeck import generate_ornstein_uhlenbeck

logger = logging.getLogger(__name__)


def build_tspan(t0, tf, dt, dtype):
    """
    Evenly spaced sample times from t0 to tf, in either direction.

    The number of steps is abs(tf - t0)/dt rounded to the nearest integer, so
    both end points are kept and the step actually used can differ from dt.
    """
    if dt <= 0:
        raise ValueError("dt must be positive.")
    n_steps = max(int(round(abs(tf - t0) / dt)), 1) + 1
    tspan = np.linspace(t0, tf, n_steps).astype(dtype)
    step = abs(tf - t0) / (n_steps - 1)
    if not np.isclose(step, dt):
        logger.warning(f"Requested dt = {dt} does not divide [{t0}, {tf}]; using step {step:.6g}")
    return tspan


def _wiener_path(path):
    root, ext = os.path.splitext(path)
    return f"{root}_W{ext or '.npy'}"


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.LOG_SAVE_PATH, args.LOG_LEVEL)

    dtype = np.dtype(args.DTYPE)
    try:
        tspan = build_tspan(args.t0, args.tf, args.dt, dtype)
        y0 = np.asarray(args.y0, dtype=dtype)
        options = sdeset(RandSeed=args.SEED) if args.SEED is not None else None
        out = generate_ornstein_uhlenbeck(
            args.theta, args.mu, args.sigma, tspan, y0, options,
            return_wiener=args.RETURN_WIENER,
        )
    except (SDEToolsError, ValueError) as e:
        logging.error(f"[ERROR] {e}")
        return 2

    Y, W = out if args.RETURN_WIENER else (out, None)

    logprint(f"Generated {Y.shape[1]} paths at {Y.shape[0]} sample times "
             f"from t={tspan[0]} to t={tspan[-1]} ({Y.dtype})")
    logprint(f"Final state mean: {np.mean(Y[-1]):.6f}, std: {np.std(Y[-1]):.6f}")

    if args.DATA_SAVE_PATH is not None:
        save_dir = os.path.dirname(os.path.abspath(args.DATA_SAVE_PATH))
        os.makedirs(save_dir, exist_ok=True)
        np.save(args.DATA_SAVE_PATH, Y)
        logprint(f"Saved paths to {args.DATA_SAVE_PATH}")
        if W is not None:
            w_path = _wiener_path(args.DATA_SAVE_PATH)
            np.save(w_path, W)
            logprint(f"Saved Wiener increments to {w_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
