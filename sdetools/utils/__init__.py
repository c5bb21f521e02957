"""Utilities package for SDETools."""

from .moments import ou_mean, ou_variance, sample_moments

__all__ = ["ou_mean", "ou_variance", "sample_moments"]
