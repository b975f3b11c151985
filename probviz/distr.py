"""Parameter descriptions and summary statistics shared by all distributions."""

from __future__ import annotations

import enum
import math
import sys
import warnings
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

BARELY_POSITIVE = 0.001
FLOAT_MIN = -sys.float_info.max
FLOAT_MAX = sys.float_info.max
UNSIGNED_MAX = 2**64 - 1


class ParamKind(enum.Enum):
    """The numeric domain a parameter lives in."""

    FLOAT = "float"
    UNSIGNED = "unsigned"
    SIGNED = "signed"


@dataclass(frozen=True)
class Param:
    """Description of one distribution parameter: default, allowed range and UI hints."""

    name: str
    default: float
    low: float
    high: float
    kind: ParamKind = ParamKind.FLOAT
    desc: Optional[str] = None
    speed: float = 1.0


class DistributionError(ValueError):
    """Raised when a distribution cannot be built from the given parameters."""


def format_stat(value: Optional[float]) -> str:
    """Format a statistic with three decimals, or "N/A" when it is undefined."""
    if value is None:
        return "N/A"
    if math.isnan(value):
        return "NaN"
    return f"{value:.3f}"


def _defined(value: Any) -> Optional[float]:
    number = float(np.asarray(value))
    return None if math.isnan(number) else number


@dataclass(frozen=True)
class SummaryStats:
    """Moments and entropy of a distribution; ``None`` marks an undefined value."""

    mean: Optional[float] = None
    variance: Optional[float] = None
    std_dev: Optional[float] = None
    entropy: Optional[float] = None
    skewness: Optional[float] = None

    @classmethod
    def from_distribution(cls, dist: Any) -> "SummaryStats":
        """Collect the statistics of a frozen scipy.stats distribution."""
        with warnings.catch_warnings(), np.errstate(all="ignore"):
            warnings.simplefilter("ignore")
            return cls(
                mean=_defined(dist.mean()),
                variance=_defined(dist.var()),
                std_dev=_defined(dist.std()),
                entropy=_defined(dist.entropy()),
                skewness=_defined(dist.stats(moments="s")),
            )

    def display_mean(self) -> str:
        return format_stat(self.mean)

    def display_variance(self) -> str:
        return format_stat(self.variance)

    def display_std_dev(self) -> str:
        return format_stat(self.std_dev)

    def display_entropy(self) -> str:
        return format_stat(self.entropy)

    def display_skewness(self) -> str:
        return format_stat(self.skewness)

    def rows(self) -> list[tuple[str, str]]:
        """Label and formatted value for each statistic, in table order."""
        return [
            ("Mean", self.display_mean()),
            ("Variance", self.display_variance()),
            ("Std. Dev.", self.display_std_dev()),
            ("Entropy", self.display_entropy()),
            ("Skewness", self.display_skewness()),
        ]