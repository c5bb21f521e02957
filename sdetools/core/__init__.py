"""Core package for SDETools: options, random sources and argument handling."""

from .arguments import SDEArguments, sde_arguments
from .options import SDEOptions, sdeset, sdeget
from .random_source import CustomSource, NormalSource, default_rng, reset_default_rng

__all__ = [
    "SDEArguments",
    "sde_arguments",
    "SDEOptions",
    "sdeset",
    "sdeget",
    "CustomSource",
    "NormalSource",
    "default_rng",
    "reset_default_rng",
]
