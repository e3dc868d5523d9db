"""geoid_statistics.core.distributions.base

Common interface for the closed-form continuous distributions.

Every distribution is an immutable value object exposing three scalar
queries (``pdf``, ``cdf``, ``ppf``). The base class adds element-wise batch
evaluation over numpy arrays and dictionary serialization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Tuple

import numpy as np

from ..errors import InvalidParameterError


class DistributionType(Enum):
    """Enumeration of supported distribution models."""
    CAUCHY = "cauchy"
    LAPLACE = "laplace"
    GAUSSIAN = "gaussian"


def _require_positive(name: str, value: float) -> None:
    """Raise InvalidParameterError unless value > 0 (NaN is rejected)."""
    if not value > 0:
        raise InvalidParameterError(f"{name} must be > 0 (but was {value})")


def _map_elementwise(fn: Callable[[float], float], values: Any) -> np.ndarray:
    """Apply a scalar function to every element, keeping the input shape."""
    arr = np.asarray(values, dtype=float)
    out = np.fromiter((fn(float(v)) for v in arr.ravel()), dtype=float, count=arr.size)
    return out.reshape(arr.shape)


class ContinuousDistribution(ABC):
    """
    Base class for univariate continuous distributions.

    Subclasses are frozen dataclasses; they validate their parameters once in
    ``__post_init__`` and never change afterwards.
    """

    distribution_type: ClassVar[DistributionType]

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Probability density at x."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Probability that the variable is less than or equal to x."""

    @abstractmethod
    def ppf(self, p: float) -> float:
        """Percent point function (quantile), the inverse of ``cdf``."""

    @abstractmethod
    def parameters(self) -> Dict[str, float]:
        """Constructor parameters by name."""

    def pdf_array(self, x: Any) -> np.ndarray:
        """Element-wise ``pdf`` over an array-like."""
        return _map_elementwise(self.pdf, x)

    def cdf_array(self, x: Any) -> np.ndarray:
        """Element-wise ``cdf`` over an array-like."""
        return _map_elementwise(self.cdf, x)

    def ppf_array(self, p: Any) -> np.ndarray:
        """Element-wise ``ppf`` over an array-like."""
        return _map_elementwise(self.ppf, p)

    def interval(self, confidence: float) -> Tuple[float, float]:
        """Central interval holding the given probability mass.

        Args:
            confidence: probability in (0, 1)

        Returns:
            (lower, upper) = (ppf((1-c)/2), ppf((1+c)/2))
        """
        if not (0.0 < confidence < 1.0):
            raise ValueError("confidence must be in (0,1)")
        tail = (1.0 - confidence) / 2.0
        return self.ppf(tail), self.ppf(1.0 - tail)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize distribution to dictionary.

        Returns:
            Dictionary with a ``type`` key and the constructor parameters
        """
        data: Dict[str, Any] = {"type": self.distribution_type.value}
        data.update(self.parameters())
        return data
