"""
Options for the location estimators.

This module defines configuration for the order-statistics helpers:
the sample quantile rule, the harmonic-mean zero cutoff and how empty input
is treated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class QuantileMethod(Enum):
    """
    Index rules for sample quantiles of sorted data (n values, 0-based index).

    Supported methods:
    - MIDPOINT: n*p - 0.5 (piecewise linear through the midpoints; Matlab)
    - LINEAR: (n-1)*p (NumPy/R default, Excel QUARTILE.INC)
    - WEIBULL: (n+1)*p - 1 (Excel QUARTILE.EXC)
    """
    MIDPOINT = "midpoint"
    LINEAR = "linear"
    WEIBULL = "weibull"

    def index(self, n: int, p: float) -> float:
        """Fractional 0-based position of the p-quantile in n sorted values."""
        if self is QuantileMethod.LINEAR:
            return (n - 1) * p
        if self is QuantileMethod.WEIBULL:
            return (n + 1) * p - 1.0
        return n * p - 0.5


@dataclass
class StatisticsOptions:
    """
    Configuration options for location estimators.

    Attributes:
        quantile_method: Sample quantile index rule (default: MIDPOINT)
        harmonic_zero_tolerance: Values with |x| at or below this contribute
            nothing to the harmonic mean's reciprocal sum (default: 1e-9)
        raise_on_empty: If True, empty input raises EmptyDataError instead of
            returning 0.0 (default: False)
    """

    quantile_method: QuantileMethod = QuantileMethod.MIDPOINT
    harmonic_zero_tolerance: float = 1e-9
    raise_on_empty: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        # Convert string to enum if needed
        if isinstance(self.quantile_method, str):
            self.quantile_method = QuantileMethod(self.quantile_method.lower().strip())

        if self.harmonic_zero_tolerance < 0:
            raise ValueError("harmonic_zero_tolerance cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "quantile_method": self.quantile_method.value,
            "harmonic_zero_tolerance": self.harmonic_zero_tolerance,
            "raise_on_empty": self.raise_on_empty,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatisticsOptions':
        """
        Create StatisticsOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New StatisticsOptions instance
        """
        return cls(
            quantile_method=data.get("quantile_method", QuantileMethod.MIDPOINT.value),
            harmonic_zero_tolerance=data.get("harmonic_zero_tolerance", 1e-9),
            raise_on_empty=bool(data.get("raise_on_empty", False)),
        )

    @classmethod
    def default(cls) -> 'StatisticsOptions':
        """
        Create options with default values.

        Returns:
            StatisticsOptions with default settings
        """
        return cls()

    def __repr__(self) -> str:
        return (
            f"StatisticsOptions("
            f"quantile={self.quantile_method.value}, "
            f"harmonic_tol={self.harmonic_zero_tolerance}, "
            f"raise_on_empty={self.raise_on_empty})"
        )
