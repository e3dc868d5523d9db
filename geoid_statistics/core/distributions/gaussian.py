"""
Gaussian (normal) distribution and Gaussian belief algebra.

The CDF and quantile go through the complementary error function in
:mod:`.erf`, so quantiles saturate at the tails rather than diverge.

Algebra:
- ``add`` / ``sub``: distribution of the sum/difference of two independent
  Gaussian variables (means add/subtract, variances always add)
- ``scale``: distribution of ``c * X``
- ``mul`` / ``div`` with another Gaussian: fusion in precision space
  (precision = 1 / variance). The product of two Gaussian densities is
  proportional to a Gaussian whose precision is the sum of the precisions;
  division removes a previously fused belief.

Variance is the only stored spread field. Precision is computed on demand and
every precision-space result is rebuilt through ``from_precision_mean``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from ..errors import InvalidParameterError
from .base import ContinuousDistribution, DistributionType, _require_positive
from .erf import erfc, ierfc

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class GaussianDistribution(ContinuousDistribution):
    """
    Gaussian distribution model.

    Attributes:
        mean: Mean (expected value)
        variance: Variance (> 0)
        standard_deviation: Square root of the variance, derived at construction
    """

    mean: float
    variance: float
    standard_deviation: float = field(init=False, compare=False)

    distribution_type = DistributionType.GAUSSIAN

    def __post_init__(self):
        """Validate parameters and derive the standard deviation."""
        object.__setattr__(self, "mean", float(self.mean))
        object.__setattr__(self, "variance", float(self.variance))
        _require_positive("Variance", self.variance)
        object.__setattr__(self, "standard_deviation", math.sqrt(self.variance))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def precision(self) -> float:
        """Reciprocal of the variance."""
        return 1.0 / self.variance

    @property
    def precision_mean(self) -> float:
        """Precision-weighted mean (precision * mean)."""
        return self.mean / self.variance

    def pdf(self, x: float) -> float:
        d = x - self.mean
        e = math.exp(-(d * d) / (2.0 * self.variance))
        return e / (self.standard_deviation * _SQRT_2PI)

    def cdf(self, x: float) -> float:
        return 0.5 * erfc(-(x - self.mean) / (self.standard_deviation * _SQRT_2))

    def ppf(self, p: float) -> float:
        """Quantile function.

        Args:
            p: probability, meaningful in (0, 1)

        Returns:
            x such that cdf(x) = p. Outside (0, 1) the result is the
            saturated value mean -/+ 100 * sqrt(2) * standard_deviation.
        """
        return self.mean - self.standard_deviation * _SQRT_2 * ierfc(2.0 * p)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def mul(self, other: Union[float, GaussianDistribution]) -> GaussianDistribution:
        """Scale by a constant, or fuse with another Gaussian belief.

        Args:
            other: scalar factor or Gaussian

        Returns:
            New Gaussian; with a Gaussian argument the precisions and the
            precision-weighted means add.
        """
        if not isinstance(other, GaussianDistribution):
            return self.scale(other)

        precision = self.precision
        other_precision = other.precision
        return self.from_precision_mean(
            precision + other_precision,
            precision * self.mean + other_precision * other.mean,
        )

    def div(self, other: Union[float, GaussianDistribution]) -> GaussianDistribution:
        """Scale by ``1 / other``, or remove a fused Gaussian belief.

        Args:
            other: non-zero scalar divisor or Gaussian

        Returns:
            New Gaussian

        Raises:
            InvalidParameterError: if the scalar divisor is zero, or if the
                divisor's precision is not smaller than this one's (the
                resulting precision would not be positive)
        """
        if not isinstance(other, GaussianDistribution):
            if other == 0:
                raise InvalidParameterError("Cannot divide a Gaussian by zero")
            return self.scale(1.0 / other)

        precision = self.precision
        other_precision = other.precision
        return self.from_precision_mean(
            precision - other_precision,
            precision * self.mean - other_precision * other.mean,
        )

    def add(self, other: GaussianDistribution) -> GaussianDistribution:
        """Distribution of X + Y for independent X ~ self, Y ~ other."""
        return GaussianDistribution(self.mean + other.mean, self.variance + other.variance)

    def sub(self, other: GaussianDistribution) -> GaussianDistribution:
        """Distribution of X - Y for independent X ~ self, Y ~ other."""
        return GaussianDistribution(self.mean - other.mean, self.variance + other.variance)

    def scale(self, c: float) -> GaussianDistribution:
        """Distribution of c * X.

        Raises:
            InvalidParameterError: if c is zero (degenerate variance)
        """
        return GaussianDistribution(self.mean * c, self.variance * c * c)

    @classmethod
    def from_precision_mean(cls, precision: float, precision_mean: float) -> GaussianDistribution:
        """
        Build a Gaussian from precision-space parameters.

        Args:
            precision: reciprocal of the variance (> 0)
            precision_mean: precision * mean

        Returns:
            Gaussian with mean = precision_mean / precision and
            variance = 1 / precision

        Raises:
            InvalidParameterError: if precision is not strictly positive
        """
        if not precision > 0:
            raise InvalidParameterError(f"Precision must be > 0 (but was {precision})")
        return cls(precision_mean / precision, 1.0 / precision)

    def __mul__(self, other: Any) -> GaussianDistribution:
        if isinstance(other, (GaussianDistribution, numbers.Real)):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> GaussianDistribution:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> GaussianDistribution:
        if isinstance(other, (GaussianDistribution, numbers.Real)):
            return self.div(other)
        return NotImplemented

    def __add__(self, other: Any) -> GaussianDistribution:
        if isinstance(other, GaussianDistribution):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> GaussianDistribution:
        if isinstance(other, GaussianDistribution):
            return self.sub(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def parameters(self) -> Dict[str, float]:
        return {"mean": self.mean, "variance": self.variance}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GaussianDistribution:
        """
        Create a GaussianDistribution from a dictionary.

        Accepts ``variance``, or ``standard_deviation``/``sigma`` which is
        squared.
        """
        if "variance" in data:
            variance = float(data["variance"])
        else:
            sigma = data["standard_deviation"] if "standard_deviation" in data else data["sigma"]
            sigma = float(sigma)
            variance = sigma * sigma
        return cls(mean=float(data["mean"]), variance=variance)

    def __repr__(self) -> str:
        return f"GaussianDistribution(mean={self.mean:g}, variance={self.variance:g})"
