"""
Core module for geoid_statistics.

Pure Python implementations (numpy for array handling, no SciPy). Contains
the distribution models, the location estimators, their options and result
types, and the exception taxonomy.
"""

from .errors import InvalidParameterError, EmptyDataError

from .distributions import (
    erfc,
    ierfc,
    ContinuousDistribution,
    DistributionType,
    CauchyDistribution,
    LaplaceDistribution,
    GaussianDistribution,
    distribution_from_dict,
)

from .models import StatisticsOptions, QuantileMethod

from .results import LocationSummary

from .location import (
    arithmetic_mean,
    harmonic_mean,
    trimmed_mean,
    interquartile_mean,
    midrange,
    median,
    quantile,
    quantiles,
    mode,
    summarize,
)

__all__ = [
    # Errors
    "InvalidParameterError",
    "EmptyDataError",

    # Error function
    "erfc",
    "ierfc",

    # Distributions
    "ContinuousDistribution",
    "DistributionType",
    "CauchyDistribution",
    "LaplaceDistribution",
    "GaussianDistribution",
    "distribution_from_dict",

    # Options and results
    "StatisticsOptions",
    "QuantileMethod",
    "LocationSummary",

    # Location estimators
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
