"""geoid_statistics.core.location.means

Mean-type location estimators.

Includes:
- Arithmetic mean
- Harmonic mean (near-zero values contribute nothing to the reciprocal sum)
- Trimmed and interquartile means
- Midrange

Empty input returns 0.0 unless ``StatisticsOptions.raise_on_empty`` is set.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from ..models.options import StatisticsOptions
from .sample import as_sample, empty_result, resolve_options


def arithmetic_mean(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Sum of the values divided by their count."""
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return empty_result(opts, "arithmetic_mean")
    return float(np.sum(x) / x.size)


def harmonic_mean(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Harmonic mean n / sum(1/x_i).

    Values with ``|x_i| <= options.harmonic_zero_tolerance`` are treated as
    contributing 0 to the reciprocal sum instead of blowing it up.

    Args:
        data: sample values
        options: estimator options

    Returns:
        harmonic mean; inf when every reciprocal term is zero
    """
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return empty_result(opts, "harmonic_mean")

    mask = np.abs(x) > opts.harmonic_zero_tolerance
    reciprocals = np.divide(1.0, x, out=np.zeros_like(x), where=mask)
    s = float(np.sum(reciprocals))
    if s == 0.0:
        return math.inf
    return x.size / s


def trimmed_mean(
    data: Iterable[float],
    trim: float = 0.2,
    options: Optional[StatisticsOptions] = None,
) -> float:
    """Mean after discarding floor(n*trim) values from each end.

    Args:
        data: sample values
        trim: fraction cut from each tail, in [0, 0.5)
        options: estimator options

    Returns:
        trimmed mean (plain mean when trimming would leave nothing)
    """
    if not (0.0 <= trim < 0.5):
        raise ValueError(f"Trim must be in [0, 0.5), got {trim}")
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return empty_result(opts, "trimmed_mean")

    x = np.sort(x)
    n = x.size
    k = int(n * trim)
    if 2 * k >= n:
        return float(np.mean(x))
    return float(np.mean(x[k:n - k]))


def interquartile_mean(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Mean of the central half of the data (25% trimmed mean)."""
    return trimmed_mean(data, 0.25, options)


def midrange(data: Iterable[float], options: Optional[StatisticsOptions] = None) -> float:
    """Average of the minimum and maximum."""
    opts = resolve_options(options)
    x = as_sample(data)
    if x.size == 0:
        return empty_result(opts, "midrange")
    return 0.5 * (float(np.min(x)) + float(np.max(x)))
