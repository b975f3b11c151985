"""State and plot data of the continuous-distribution panel."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .cont_distr import ContDistr
from .distr import DistributionError, Param, SummaryStats

SAMPLES = 1000
LOWER_QUANTILE = 0.001
UPPER_QUANTILE = 0.999


def linspace(start: float, stop: float, n: int) -> list[float]:
    """``n`` evenly spaced values from ``start`` to ``stop`` inclusive."""
    step = (stop - start) / (n - 1) if n > 1 else 0.0
    return [start + step * i for i in range(n)]


@dataclass(frozen=True)
class Curves:
    """Sampled density and cumulative curves with the plot bounds to show them in."""

    x: tuple[float, ...]
    pdf: tuple[float, ...]
    cdf: tuple[float, ...]
    x_bounds: tuple[float, float]
    y_bounds: tuple[float, float]


class ContPanel:
    """Selected continuous distribution and its three parameter slots."""

    def __init__(self) -> None:
        self.kind = ContDistr.NORMAL
        self.defaults: list[Param] = self.kind.defaults()
        self._params = [0.0, 0.0, 0.0]
        for slot, param in enumerate(self.defaults):
            self._params[slot] = param.default

    @property
    def params(self) -> tuple[float, float, float]:
        a, b, c = self._params
        return a, b, c

    def select(self, kind: ContDistr) -> None:
        """Switch distribution and reset its parameters to their defaults."""
        self.kind = ContDistr(kind)
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

    def plot_range(self) -> Optional[tuple[float, float]]:
        """The x interval to plot, or None when invalid or unbounded."""
        try:
            dist = self.distribution()
        except DistributionError:
            return None
        if self.kind is ContDistr.CAUCHY:
            location, scale, _ = self._params
            low, high = location - 10.0 * scale, location + 10.0 * scale
        else:
            with np.errstate(all="ignore"), warnings.catch_warnings():
                warnings.simplefilter("ignore")
                low = float(dist.ppf(LOWER_QUANTILE))
                high = float(dist.ppf(UPPER_QUANTILE))
        if low == -math.inf or high == math.inf:
            return None
        return low, high

    def curves(self) -> Optional[Curves]:
        """PDF and CDF sampled across the plot range, or None if nothing can be drawn."""
        bounds = self.plot_range()
        if bounds is None:
            return None
        low, high = bounds
        dist = self.distribution()
        xs = linspace(low, high, SAMPLES)
        points = np.asarray(xs)
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore")
            pdf = tuple(float(v) for v in dist.pdf(points))
            cdf = tuple(float(v) for v in dist.cdf(points))
        max_y = max([1.0, *(p for p in pdf if p > 1.0)]) + 0.2
        return Curves(
            x=tuple(xs),
            pdf=pdf,
            cdf=cdf,
            x_bounds=(low - 1.0, high + 1.0),
            y_bounds=(0.0, max_y),
        )