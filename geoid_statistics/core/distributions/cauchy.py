"""
Cauchy (Lorentz) distribution.

A location-scale family with heavy tails; neither mean nor variance exist,
so the model is parameterized by its peak location and half-width.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .base import ContinuousDistribution, DistributionType, _require_positive


@dataclass(frozen=True)
class CauchyDistribution(ContinuousDistribution):
    """
    Cauchy distribution model.

    Attributes:
        x0: Location parameter (position of the peak, also the median)
        gamma: Scale parameter, the half-width at half-maximum (> 0)
    """

    x0: float
    gamma: float

    distribution_type = DistributionType.CAUCHY

    def __post_init__(self):
        """Validate parameters after initialization."""
        object.__setattr__(self, "x0", float(self.x0))
        object.__setattr__(self, "gamma", float(self.gamma))
        _require_positive("Gamma", self.gamma)

    @property
    def median(self) -> float:
        """Median of the distribution (equal to x0)."""
        return self.x0

    def pdf(self, x: float) -> float:
        u = (x - self.x0) / self.gamma
        return 1.0 / (math.pi * self.gamma * (1.0 + u * u))

    def cdf(self, x: float) -> float:
        return math.atan((x - self.x0) / self.gamma) / math.pi + 0.5

    def ppf(self, p: float) -> float:
        # p = 0 and p = 1 are poles of tan; not clamped
        return self.x0 + self.gamma * math.tan(math.pi * (p - 0.5))

    def parameters(self) -> Dict[str, float]:
        return {"x0": self.x0, "gamma": self.gamma}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CauchyDistribution':
        """
        Create a CauchyDistribution from a dictionary.

        Accepts ``x0``/``location`` and ``gamma``/``scale`` keys.
        """
        x0 = data["x0"] if "x0" in data else data["location"]
        gamma = data["gamma"] if "gamma" in data else data["scale"]
        return cls(x0=float(x0), gamma=float(gamma))

    def __repr__(self) -> str:
        return f"CauchyDistribution(x0={self.x0:g}, gamma={self.gamma:g})"
