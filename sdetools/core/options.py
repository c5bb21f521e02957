"""
Options for SDETools generators.

Only the fields that select the source of Wiener increments are carried here,
plus the Stratonovich flag that solvers share with the analytic processes.
Option names are accepted either in the toolbox spelling (``RandFUN``,
``RandSeed``, ``Stratonovich``, case-insensitive) or in snake_case.
"""

from dataclasses import dataclass, fields, replace
from numbers import Integral
from typing import Any, Callable, Mapping, Optional

from .exceptions import InvalidOptions


_ALIASES = {
    "randfun": "rand_fun",
    "rand_fun": "rand_fun",
    "randseed": "rand_seed",
    "rand_seed": "rand_seed",
    "stratonovich": "stratonovich",
}


@dataclass(frozen=True)
class SDEOptions:
    """
    Immutable option set for SDE generators.

    Parameters
    ----------
    rand_fun : callable, optional
        Alternative source of standard normal variates, called as
        ``rand_fun(rows, cols)``. Its output is validated on use.
    rand_seed : int, optional
        Seed for a new random stream, used instead of the default stream.
    stratonovich : bool, optional
        Use the Stratonovich interpretation (default: True). Has no effect on
        additive-noise processes.
    """

    rand_fun: Optional[Callable[[int, int], Any]] = None
    rand_seed: Optional[int] = None
    stratonovich: bool = True

    def __post_init__(self):
        if self.rand_fun is not None and not callable(self.rand_fun):
            raise InvalidOptions("RandFUN must be a callable.")
        if self.rand_seed is not None:
            if isinstance(self.rand_seed, bool) or not isinstance(self.rand_seed, Integral):
                raise InvalidOptions("RandSeed must be a non-negative integer.")
            if self.rand_seed < 0:
                raise InvalidOptions("RandSeed must be a non-negative integer.")
        if self.rand_fun is not None and self.rand_seed is not None:
            raise InvalidOptions(
                "RandSeed cannot be combined with RandFUN; seed the custom "
                "function instead."
            )
        if not isinstance(self.stratonovich, bool):
            raise InvalidOptions("Stratonovich must be True or False.")


def _canonical_name(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidOptions(f"Option names must be strings, got {name!r}.")
    try:
        return _ALIASES[name.lower()]
    except KeyError:
        valid = ", ".join(f.name for f in fields(SDEOptions))
        raise InvalidOptions(
            f"Unrecognized option '{name}'. Valid options: {valid}."
        ) from None


def sdeset(options: Optional[Any] = None, **changes) -> SDEOptions:
    """
    Create or alter an SDE options object.

    ``sdeset(RandSeed=1)`` builds a new set; ``sdeset(opts, RandFUN=f)``
    returns a copy of ``opts`` with ``rand_fun`` replaced.
    """
    base = as_options(options)
    updates = {}
    for name, value in changes.items():
        updates[_canonical_name(name)] = value
    return replace(base, **updates)


def sdeget(options: Optional[Any], name: str, default: Any = None) -> Any:
    """Get an option value by name, or ``default`` when it is unset."""
    value = getattr(as_options(options), _canonical_name(name))
    return default if value is None else value


def as_options(obj: Optional[Any]) -> SDEOptions:
    """
    Coerce ``None``, an ``SDEOptions`` instance, or a mapping of option names
    into an ``SDEOptions`` instance.
    """
    if obj is None:
        return SDEOptions()
    if isinstance(obj, SDEOptions):
        return obj
    if isinstance(obj, Mapping):
        values = {_canonical_name(name): value for name, value in obj.items()}
        return SDEOptions(**values)
    raise InvalidOptions(
        f"Invalid SDE options object of type {type(obj).__name__}. "
        "Use sdeset() or pass a mapping of option names."
    )


def is_options(obj: Any) -> bool:
    """True when ``obj`` looks like an options object rather than data."""
    return isinstance(obj, (SDEOptions, Mapping))
