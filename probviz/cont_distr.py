"""Continuous distributions: their parameters and how to build them."""

from __future__ import annotations

import enum
import math
from typing import Any, Callable, Optional

from scipy import stats

from .distr import BARELY_POSITIVE, FLOAT_MAX, FLOAT_MIN, DistributionError, Param


class ContDistr(enum.Enum):
    """The continuous distributions the visualizer offers, in menu order."""

    NORMAL = "Normal"
    GAMMA = "Gamma"
    BETA = "Beta"
    CAUCHY = "Cauchy"
    CHI_SQUARED = "ChiSquared"
    EXP = "Exp"
    FISHER_SNEDECOR = "FisherSnedecor"
    GUMBEL = "Gumbel"
    INVERSE_GAMMA = "InverseGamma"
    LAPLACE = "Laplace"
    LOG_NORMAL = "LogNormal"
    PARETO = "Pareto"
    STUDENTS_T = "StudentsT"
    TRIANGULAR = "Triangular"
    UNIFORM = "Uniform"
    WEIBULL = "Weibull"

    def __str__(self) -> str:
        return self.value

    def defaults(self) -> list[Param]:
        """Parameter descriptions in the order ``build`` takes them."""
        return list(_DEFAULTS[self])

    def build(self, par1: float, par2: float = 0.0, par3: float = 0.0) -> Any:
        """Return a frozen scipy.stats distribution; unused parameters are ignored.

        Raises DistributionError when the parameters are invalid.
        """
        return _BUILDERS[self](float(par1), float(par2), float(par3))


def _float(
    name: str,
    default: float,
    low: float = FLOAT_MIN,
    high: float = FLOAT_MAX,
    *,
    desc: Optional[str] = None,
    speed: float = 1.0,
) -> Param:
    return Param(name=name, default=default, low=low, high=high, desc=desc, speed=speed)


def _positive_param(name: str, default: float, high: float = FLOAT_MAX, speed: float = 0.1) -> Param:
    return _float(name, default, BARELY_POSITIVE, high, desc=">0", speed=speed)


_DEFAULTS: dict[ContDistr, tuple[Param, ...]] = {
    ContDistr.NORMAL: (_float("Mean", 0.0), _positive_param("Std. dev.", 1.0)),
    ContDistr.GAMMA: (_positive_param("Shape", 1.0), _positive_param("Rate", 1.0)),
    ContDistr.BETA: (_positive_param("Shape A", 2.0), _positive_param("Shape B", 2.0)),
    ContDistr.CAUCHY: (_float("Location", 0.0), _positive_param("Scale", 1.0)),
    ContDistr.CHI_SQUARED: (_float("Freedom", 3.0, 1.0, FLOAT_MAX, desc=">0", speed=1.0),),
    ContDistr.EXP: (_positive_param("Rate", 1.0),),
    ContDistr.FISHER_SNEDECOR: (
        _positive_param("Freedom 1", 3.0, speed=1.0),
        _positive_param("Freedom 2", 3.0, speed=1.0),
    ),
    ContDistr.GUMBEL: (_float("Location", 0.0), _positive_param("Scale", 1.0)),
    ContDistr.INVERSE_GAMMA: (_positive_param("Shape", 2.0), _positive_param("Rate", 2.0)),
    ContDistr.LAPLACE: (_float("Location", 0.0), _positive_param("Scale", 1.0)),
    ContDistr.LOG_NORMAL: (
        _float("Location", 0.0),
        _positive_param("Scale", 0.5, high=3.0, speed=0.01),
    ),
    ContDistr.PARETO: (_positive_param("Scale", 1.0), _positive_param("Shape", 2.0, high=1000.0)),
    ContDistr.STUDENTS_T: (
        _float("Location", 0.0),
        _positive_param("Scale", 1.0),
        _positive_param("Freedom", 2.0),
    ),
    ContDistr.TRIANGULAR: (
        _float("Min", 0.0, desc="<Max", speed=0.1),
        _float("Max", 5.0, desc=">Min", speed=0.1),
        _float("Mode", 2.5, desc="Min <= Mode <= Max", speed=0.1),
    ),
    ContDistr.UNIFORM: (
        _float("Min", 0.0, desc="<Max", speed=0.1),
        _float("Max", 1.0, desc=">Min", speed=0.1),
    ),
    ContDistr.WEIBULL: (_positive_param("Shape", 5.0), _positive_param("Scale", 1.0)),
}


def _require_number(name: str, value: float) -> None:
    if math.isnan(value):
        raise DistributionError(f"{name} must be a number")


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        raise DistributionError(f"{name} must be > 0, got {value}")


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise DistributionError(f"{name} must be finite, got {value}")


def _normal(mean: float, std_dev: float, _: float) -> Any:
    _require_number("Mean", mean)
    _require_positive("Std. dev.", std_dev)
    return stats.norm(loc=mean, scale=std_dev)


def _gamma(shape: float, rate: float, _: float) -> Any:
    _require_positive("Shape", shape)
    _require_positive("Rate", rate)
    return stats.gamma(a=shape, scale=1.0 / rate)


def _beta(shape_a: float, shape_b: float, _: float) -> Any:
    _require_positive("Shape A", shape_a)
    _require_positive("Shape B", shape_b)
    return stats.beta(a=shape_a, b=shape_b)


def _cauchy(location: float, scale: float, _: float) -> Any:
    _require_number("Location", location)
    _require_positive("Scale", scale)
    return stats.cauchy(loc=location, scale=scale)


def _chi_squared(freedom: float, _: float, __: float) -> Any:
    _require_positive("Freedom", freedom)
    return stats.chi2(df=freedom)


def _exp(rate: float, _: float, __: float) -> Any:
    _require_positive("Rate", rate)
    return stats.expon(scale=1.0 / rate)


def _fisher_snedecor(freedom_1: float, freedom_2: float, _: float) -> Any:
    _require_positive("Freedom 1", freedom_1)
    _require_positive("Freedom 2", freedom_2)
    return stats.f(dfn=freedom_1, dfd=freedom_2)


def _gumbel(location: float, scale: float, _: float) -> Any:
    _require_number("Location", location)
    _require_positive("Scale", scale)
    return stats.gumbel_r(loc=location, scale=scale)


def _inverse_gamma(shape: float, rate: float, _: float) -> Any:
    _require_positive("Shape", shape)
    _require_positive("Rate", rate)
    return stats.invgamma(a=shape, scale=rate)


def _laplace(location: float, scale: float, _: float) -> Any:
    _require_number("Location", location)
    _require_positive("Scale", scale)
    return stats.laplace(loc=location, scale=scale)


def _log_normal(location: float, scale: float, _: float) -> Any:
    _require_number("Location", location)
    _require_positive("Scale", scale)
    return stats.lognorm(s=scale, scale=math.exp(location))


def _pareto(scale: float, shape: float, _: float) -> Any:
    _require_positive("Scale", scale)
    _require_positive("Shape", shape)
    return stats.pareto(b=shape, scale=scale)


def _students_t(location: float, scale: float, freedom: float) -> Any:
    _require_number("Location", location)
    _require_positive("Scale", scale)
    _require_positive("Freedom", freedom)
    return stats.t(df=freedom, loc=location, scale=scale)


def _triangular(low: float, high: float, mode: float) -> Any:
    for name, value in (("Min", low), ("Max", high), ("Mode", mode)):
        _require_finite(name, value)
    if not low < high:
        raise DistributionError(f"Min must be < Max, got {low} and {high}")
    if not low <= mode <= high:
        raise DistributionError(f"Mode must lie in [{low}, {high}], got {mode}")
    width = high - low
    return stats.triang(c=(mode - low) / width, loc=low, scale=width)


def _uniform(low: float, high: float, _: float) -> Any:
    _require_finite("Min", low)
    _require_finite("Max", high)
    if not low < high:
        raise DistributionError(f"Min must be < Max, got {low} and {high}")
    return stats.uniform(loc=low, scale=high - low)


def _weibull(shape: float, scale: float, _: float) -> Any:
    _require_positive("Shape", shape)
    _require_positive("Scale", scale)
    return stats.weibull_min(c=shape, scale=scale)


_BUILDERS: dict[ContDistr, Callable[[float, float, float], Any]] = {
    ContDistr.NORMAL: _normal,
    ContDistr.GAMMA: _gamma,
    ContDistr.BETA: _beta,
    ContDistr.CAUCHY: _cauchy,
    ContDistr.CHI_SQUARED: _chi_squared,
    ContDistr.EXP: _exp,
    ContDistr.FISHER_SNEDECOR: _fisher_snedecor,
    ContDistr.GUMBEL: _gumbel,
    ContDistr.INVERSE_GAMMA: _inverse_gamma,
    ContDistr.LAPLACE: _laplace,
    ContDistr.LOG_NORMAL: _log_normal,
    ContDistr.PARETO: _pareto,
    ContDistr.STUDENTS_T: _students_t,
    ContDistr.TRIANGULAR: _triangular,
    ContDistr.UNIFORM: _uniform,
    ContDistr.WEIBULL: _weibull,
}