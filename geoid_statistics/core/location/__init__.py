"""Location and order-statistics estimators.

Stateless reducers over numeric samples:
- Arithmetic, harmonic, trimmed and interquartile means, midrange
- Median, mode and sample quantiles
- ``summarize`` to evaluate all of them at once
"""

from .means import arithmetic_mean, harmonic_mean, trimmed_mean, interquartile_mean, midrange
from .order_statistics import median, quantile, quantiles, mode
from .summary import summarize

__all__ = [
    "arithmetic_mean",
    "harmonic_mean",
    "trimmed_mean",
    "interquartile_mean",
    "midrange",
    "median",
    "quantile",
    "quantiles",
    "mode",
    "summarize",
]
