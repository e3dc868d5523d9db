"""Evaluate every location estimator over one sample."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from ..models.options import StatisticsOptions
from ..results.summary import LocationSummary
from .means import arithmetic_mean, harmonic_mean, interquartile_mean, midrange
from .order_statistics import median, mode, quantiles
from .sample import as_sample, empty_result, resolve_options

logger = logging.getLogger(__name__)

DEFAULT_PROBABILITIES = (0.25, 0.5, 0.75)


def summarize(
    data: Iterable[float],
    probabilities: Sequence[float] = DEFAULT_PROBABILITIES,
    options: Optional[StatisticsOptions] = None,
) -> LocationSummary:
    """
    Compute all location estimators for a sample.

    Args:
        data: sample values
        probabilities: probabilities of the quantiles to report
        options: estimator options shared by every estimator

    Returns:
        LocationSummary

    Raises:
        EmptyDataError: if the sample is empty and options.raise_on_empty is set
        ValueError: if a probability is outside [0, 1]
    """
    opts = resolve_options(options)
    x = as_sample(data)
    probs = [float(p) for p in probabilities]
    if any(not (0.0 <= p <= 1.0) for p in probs):
        raise ValueError("probabilities must be in [0,1]")

    logger.debug(
        "Summarizing %d values (quantiles %s, method %s)",
        x.size, probs, opts.quantile_method.value,
    )

    if x.size == 0:
        lo = hi = empty_result(opts, "summarize")
    else:
        lo, hi = float(np.min(x)), float(np.max(x))

    return LocationSummary(
        count=int(x.size),
        minimum=lo,
        maximum=hi,
        arithmetic_mean=arithmetic_mean(x, opts),
        harmonic_mean=harmonic_mean(x, opts),
        interquartile_mean=interquartile_mean(x, opts),
        median=median(x, opts),
        midrange=midrange(x, opts),
        mode=mode(x, opts),
        quantiles=dict(zip(probs, quantiles(x, probs, opts))),
        quantile_method=opts.quantile_method.value,
    )
