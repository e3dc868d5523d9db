"""
Laplace (double exponential) distribution.

Parameterized by mean and variance; the scale ``b = sqrt(variance / 2)`` is
derived once at construction.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict

from .base import ContinuousDistribution, DistributionType, _require_positive


@dataclass(frozen=True)
class LaplaceDistribution(ContinuousDistribution):
    """
    Laplace distribution model.

    Attributes:
        mean: Mean (also the median and mode)
        variance: Variance (> 0)
        b: Scale parameter derived from the variance
    """

    mean: float
    variance: float
    b: float = field(init=False, compare=False)

    distribution_type = DistributionType.LAPLACE

    def __post_init__(self):
        """Validate parameters and derive the scale."""
        object.__setattr__(self, "mean", float(self.mean))
        object.__setattr__(self, "variance", float(self.variance))
        _require_positive("Variance", self.variance)
        object.__setattr__(self, "b", math.sqrt(self.variance) / math.sqrt(2.0))

    @property
    def median(self) -> float:
        return self.mean

    def pdf(self, x: float) -> float:
        return math.exp(-abs(x - self.mean) / self.b) / (2.0 * self.b)

    def cdf(self, x: float) -> float:
        if x < self.mean:
            return 0.5 * math.exp((x - self.mean) / self.b)
        return 1.0 - 0.5 * math.exp(-(x - self.mean) / self.b)

    def ppf(self, p: float) -> float:
        """Quantile function.

        Args:
            p: probability in [0, 1]

        Returns:
            x such that cdf(x) = p; -inf at p = 0 and +inf at p = 1
        """
        if not (0.0 <= p <= 1.0):
            raise ValueError("p must be in [0,1]")
        if p < 0.5:
            if p == 0.0:
                return -math.inf
            return self.mean + self.b * math.log(2.0 * p)
        if p == 1.0:
            return math.inf
        return self.mean - self.b * math.log(2.0 * (1.0 - p))

    def parameters(self) -> Dict[str, float]:
        return {"mean": self.mean, "variance": self.variance}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LaplaceDistribution':
        """
        Create a LaplaceDistribution from a dictionary.

        Accepts either ``variance`` or the scale ``b``.
        """
        if "variance" in data:
            variance = float(data["variance"])
        else:
            b = float(data["b"])
            variance = 2.0 * b * b
        return cls(mean=float(data["mean"]), variance=variance)

    def __repr__(self) -> str:
        return f"LaplaceDistribution(mean={self.mean:g}, variance={self.variance:g})"
