"""Stochastic processes with analytic solutions."""

from .ornstein_uhlenbeck import generate_ornstein_uhlenbeck

__all__ = ["generate_ornstein_uhlenbeck"]
