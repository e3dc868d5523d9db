"""geoid_statistics.core.location.order_statistics

Estimators based on sorted data or value counts: median, quantiles, mode.

Sample quantiles interpolate linearly between order statistics. The
fractional index of the p-quantile depends on ``StatisticsOptions.quantile_method``
and is clamped to the data range, so p = 0 and p = 1 return the minimum and
maximum.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..models.options import QuantileMethod, StatisticsOptions
from .sample import as_sample, empty_result, resolve_options


def median(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Middle value of the sorted data; mean of the two middle values for even n."""
    opts = resolve_options(options)
    x = as_sample(data)
    n = x.size
    if n == 0:
        return empty_result(opts, "median")

    x = np.sort(x)
    m = n // 2
    if n % 2 == 0:
        return 0.5 * (float(x[m - 1]) + float(x[m]))
    return float(x[m])


def _quantile_sorted(x: np.ndarray, p: float, method: QuantileMethod) -> float:
    """p-quantile of an already sorted, non-empty array."""
    if not (0.0 <= p <= 1.0):
        raise ValueError("p must be in [0,1]")

    n = x.size
    idx = min(max(method.index(n, p), 0.0), float(n - 1))
    lo = int(math.floor(idx))
    frac = idx - lo
    if frac == 0.0:
        return float(x[lo])
    return float(x[lo] + (x[lo + 1] - x[lo]) * frac)


def quantile(data: Iterable[float], p: float, options: Optional[StatisticsOptions] = None) -> float:
    """Sample quantile for cumulative probability p.

    Args:
        data: sample values
        p: probability in [0, 1]
        options: estimator options (quantile_method selects the index rule)

    Returns:
        interpolated p-quantile
    """
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        if not (0.0 <= p <= 1.0):
            raise ValueError("p must be in [0,1]")
        return empty_result(opts, "quantile")
    return _quantile_sorted(np.sort(x), p, opts.quantile_method)


def quantiles(
    data: Iterable[float],
    probabilities: Sequence[float],
    options: Optional[StatisticsOptions] = None,
) -> List[float]:
    """Several sample quantiles, sorting the data once."""
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return [empty_result(opts, "quantile") for _ in probabilities]
    x = np.sort(x)
    return [_quantile_sorted(x, float(p), opts.quantile_method) for p in probabilities]


def mode(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Most frequent value. Ties resolve to the smallest of the tied values."""
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return empty_result(opts, "mode")
    values, counts = np.unique(x, return_counts=True)
    return float(values[int(np.argmax(counts))])
