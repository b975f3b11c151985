"""State and plot data of the discrete-distribution panel."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .disc_distr import DiscDistr
from .distr import UNSIGNED_MAX, DistributionError, Param, SummaryStats

LOWER_CDF = 0.001
UPPER_CDF = 0.999


def _cdf(dist: Any, k: int) -> float:
    return float(dist.cdf(k))


def discrete_range(dist: Any) -> tuple[int, int]:
    """Integer interval holding all but the outer 0.1% tails of the CDF.

    The lower end is one below the first point whose CDF reaches 0.001 (never
    below zero); the upper end is the first point after it whose CDF reaches 0.999.
    """
    with np.errstate(all="ignore"), warnings.catch_warnings():
        warnings.simplefilter("ignore")
        low = 0
        while _cdf(dist, low) < LOWER_CDF:
            low += 1
        low = max(low - 1, 0)
        high = low + 1
        while _cdf(dist, high) < UPPER_CDF and high < UNSIGNED_MAX:
            high += 1
    return low, high


@dataclass(frozen=True)
class Bars:
    """Probability mass and cumulative bars with the plot bounds to show them in."""

    x: tuple[int, ...]
    pmf: tuple[float, ...]
    cdf: tuple[float, ...]
    x_bounds: tuple[float, float]
    y_bounds: tuple[float, float]


class DiscPanel:
    """Selected discrete distribution and its three parameter slots."""

    def __init__(self) -> None:
        self.kind = DiscDistr.POISSON
        self.defaults: list[Param] = self.kind.defaults()
        self._params = [self.defaults[0].default, 1.0, 1.0]

    @property
    def params(self) -> tuple[float, float, float]:
        a, b, c = self._params
        return a, b, c

    def select(self, kind: DiscDistr) -> None:
        """Switch distribution and reset its parameters to their defaults."""
        self.kind = DiscDistr(kind)
        self.defaults = self.kind.defaults()
        for slot, param in enumerate(self.defaults):
            self._params[slot] = param.default

    def set_param(self, index: int, value: float) -> float:
        """Set a parameter, clamped to its allowed range; return the stored value."""
        if not 0 <= index < len(self.defaults):
            raise IndexError(f"{self.kind} has no parameter {index}")
        param = self.defaults[index]
        clamped = min(max(float(value), param.low), param.high)
        self._params[index] = clamped
        return clamped

    def distribution(self) -> Any:
        """The frozen distribution for the current parameters; raises DistributionError."""
        return self.kind.build(*self._params)

    def summary(self) -> Optional[SummaryStats]:
        """Summary statistics, or None while the parameters are invalid."""
        try:
            dist = self.distribution()
        except DistributionError:
            return None
        return SummaryStats.from_distribution(dist)

    def bars(self) -> Optional[Bars]:
        """PMF and CDF bars over the distribution's bulk, or None when invalid."""
        try:
            dist = self.distribution()
        except DistributionError:
            return None
        low, high = discrete_range(dist)
        xs = np.arange(low, high + 1)
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            pmf = tuple(float(v) for v in dist.pmf(xs))
            cdf = tuple(float(v) for v in dist.cdf(xs))
        return Bars(
            x=tuple(int(v) for v in xs),
            pmf=pmf,
            cdf=cdf,
            x_bounds=(low - 1.0, high + 1.0),
            y_bounds=(0.0, 1.2),
        )