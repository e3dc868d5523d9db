"""
Result classes for location statistics.

This module defines the output of ``summarize``: every location estimator
evaluated over one sample, plus a set of sample quantiles.
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


def _float_or_nan(value: Optional[float]) -> float:
    """Inverse of _json_safe_value for round-tripping; None becomes nan."""
    return math.nan if value is None else float(value)


@dataclass
class LocationSummary:
    """
    Location estimators computed over a single sample.

    Attributes:
        count: Number of values in the sample
        minimum: Smallest value
        maximum: Largest value
        arithmetic_mean: Arithmetic mean
        harmonic_mean: Harmonic mean (inf when all values are near zero)
        interquartile_mean: Mean of the central half of the data
        median: Median
        midrange: Average of minimum and maximum
        mode: Most frequent value
        quantiles: Sample quantiles keyed by probability
        quantile_method: Name of the quantile index rule used
    """

    count: int
    minimum: float
    maximum: float
    arithmetic_mean: float
    harmonic_mean: float
    interquartile_mean: float
    median: float
    midrange: float
    mode: float
    quantiles: Dict[float, float] = field(default_factory=dict)
    quantile_method: str = "midpoint"

    @property
    def range(self) -> float:
        """Spread between maximum and minimum."""
        return self.maximum - self.minimum

    @property
    def interquartile_range(self) -> Optional[float]:
        """Q3 - Q1 when both quartiles were requested, else None."""
        if 0.25 in self.quantiles and 0.75 in self.quantiles:
            return self.quantiles[0.75] - self.quantiles[0.25]
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize summary to dictionary (quantile keys become strings)."""
        return {
            "count": self.count,
            "minimum": _json_safe_value(self.minimum),
            "maximum": _json_safe_value(self.maximum),
            "arithmetic_mean": _json_safe_value(self.arithmetic_mean),
            "harmonic_mean": _json_safe_value(self.harmonic_mean),
            "interquartile_mean": _json_safe_value(self.interquartile_mean),
            "median": _json_safe_value(self.median),
            "midrange": _json_safe_value(self.midrange),
            "mode": _json_safe_value(self.mode),
            "quantiles": {
                repr(float(p)): _json_safe_value(q) for p, q in self.quantiles.items()
            },
            "quantile_method": self.quantile_method,
        }

    def to_json(self, indent: int = 2) -> str:
        """
        Serialize summary to JSON string.

        Args:
            indent: Number of spaces for indentation

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LocationSummary':
        """Create LocationSummary from dictionary."""
        return cls(
            count=int(data["count"]),
            minimum=_float_or_nan(data["minimum"]),
            maximum=_float_or_nan(data["maximum"]),
            arithmetic_mean=_float_or_nan(data["arithmetic_mean"]),
            harmonic_mean=_float_or_nan(data["harmonic_mean"]),
            interquartile_mean=_float_or_nan(data["interquartile_mean"]),
            median=_float_or_nan(data["median"]),
            midrange=_float_or_nan(data["midrange"]),
            mode=_float_or_nan(data["mode"]),
            quantiles={
                float(p): _float_or_nan(q) for p, q in data.get("quantiles", {}).items()
            },
            quantile_method=data.get("quantile_method", "midpoint"),
        )

    def __repr__(self) -> str:
        return (
            f"LocationSummary(n={self.count}, "
            f"mean={self.arithmetic_mean:.6g}, "
            f"median={self.median:.6g})"
        )
