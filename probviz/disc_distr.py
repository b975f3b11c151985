"""Discrete distributions: their parameters and how to build them."""

from __future__ import annotations

import enum
import math
from typing import Any, Callable

from scipy import stats

from .distr import (
    BARELY_POSITIVE,
    FLOAT_MAX,
    UNSIGNED_MAX,
    DistributionError,
    Param,
    ParamKind,
)


class DiscDistr(enum.Enum):
    """The discrete distributions the visualizer offers, in menu order."""

    POISSON = "Poisson"
    BINOMIAL = "Binomial"
    BERNOULLI = "Bernoulli"
    GEOMETRIC = "Geometric"
    HYPERGEOMETRIC = "Hypergeometric"

    def __str__(self) -> str:
        return self.value

    def defaults(self) -> list[Param]:
        """Parameter descriptions in the order ``build`` takes them."""
        return list(_DEFAULTS[self])

    def build(self, par1: float, par2: float = 0.0, par3: float = 0.0) -> Any:
        """Return a frozen scipy.stats distribution; unused parameters are ignored.

        Integer parameters are truncated and saturated to the unsigned range.
        Raises DistributionError when the parameters are invalid.
        """
        return _BUILDERS[self](float(par1), float(par2), float(par3))


def _probability(low: float = 0.0) -> Param:
    return Param(
        name="p",
        default=0.5,
        low=low,
        high=1.0,
        desc="0 <= p <= 1",
        speed=0.05,
    )


def _count(name: str, default: int, low: int, desc: str) -> Param:
    return Param(
        name=name,
        default=float(default),
        low=float(low),
        high=float(UNSIGNED_MAX),
        kind=ParamKind.UNSIGNED,
        desc=desc,
        speed=1.0,
    )


_DEFAULTS: dict[DiscDistr, tuple[Param, ...]] = {
    DiscDistr.POISSON: (
        Param(name="Lambda", default=1.0, low=BARELY_POSITIVE, high=FLOAT_MAX, desc=">0", speed=0.1),
    ),
    DiscDistr.BINOMIAL: (_probability(), _count("n", 5, 0, ">=0")),
    DiscDistr.BERNOULLI: (_probability(),),
    DiscDistr.GEOMETRIC: (_probability(BARELY_POSITIVE),),
    DiscDistr.HYPERGEOMETRIC: (
        _count("Population", 500, 1, "0 < Population <= Successes"),
        _count("Successes", 50, 0, "0 <= Successes <= Population"),
        _count("Draws", 100, 0, "0 <= Draws <= Population"),
    ),
}


def _as_unsigned(value: float) -> int:
    """Truncate towards zero and saturate into the unsigned 64-bit range; NaN gives 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= 2.0**64:
        return UNSIGNED_MAX
    return int(value)


def _require_probability(value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise DistributionError(f"p must lie in [0, 1], got {value}")


def _poisson(rate: float, _: float, __: float) -> Any:
    if not rate > 0:
        raise DistributionError(f"Lambda must be > 0, got {rate}")
    return stats.poisson(mu=rate)


def _binomial(p: float, n: float, _: float) -> Any:
    _require_probability(p)
    return stats.binom(n=_as_unsigned(n), p=p)


def _bernoulli(p: float, _: float, __: float) -> Any:
    _require_probability(p)
    return stats.bernoulli(p=p)


def _geometric(p: float, _: float, __: float) -> Any:
    if not 0.0 < p <= 1.0:
        raise DistributionError(f"p must lie in (0, 1], got {p}")
    return stats.geom(p=p)


def _hypergeometric(population: float, successes: float, draws: float) -> Any:
    total = _as_unsigned(population)
    good = _as_unsigned(successes)
    drawn = _as_unsigned(draws)
    if good > total:
        raise DistributionError(f"Successes ({good}) must not exceed Population ({total})")
    if drawn > total:
        raise DistributionError(f"Draws ({drawn}) must not exceed Population ({total})")
    return stats.hypergeom(M=total, n=good, N=drawn)


_BUILDERS: dict[DiscDistr, Callable[[float, float, float], Any]] = {
    DiscDistr.POISSON: _poisson,
    DiscDistr.BINOMIAL: _binomial,
    DiscDistr.BERNOULLI: _bernoulli,
    DiscDistr.GEOMETRIC: _geometric,
    DiscDistr.HYPERGEOMETRIC: _hypergeometric,
}