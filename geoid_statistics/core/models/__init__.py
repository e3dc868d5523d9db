"""Configuration models for the statistics core."""

from .options import StatisticsOptions, QuantileMethod

__all__ = [
    "StatisticsOptions",
    "QuantileMethod",
]
