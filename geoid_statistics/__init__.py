"""
Geoid Statistics - distribution models and location estimators

A small statistics toolkit with closed-form Cauchy, Laplace and Gaussian
distributions (pdf, cdf, ppf), Gaussian belief algebra, and order-statistics
location estimators.

Conventions:
- Distributions are immutable; every operation returns a new value
- Gaussian and Laplace are parameterized by mean and variance, Cauchy by
  location x0 and half-width gamma
- Gaussian quantiles saturate at the tails instead of returning infinities
- Invalid scale/variance parameters raise InvalidParameterError (a ValueError)
"""

__version__ = "1.0.0"
__author__ = "Geoid"

from .core.errors import InvalidParameterError, EmptyDataError
from .core.distributions import (
    erfc,
    ierfc,
    CauchyDistribution,
    LaplaceDistribution,
    GaussianDistribution,
    distribution_from_dict,
)
from .core.models import StatisticsOptions, QuantileMethod
from .core.results import LocationSummary
from .core.location import (
    arithmetic_mean,
    harmonic_mean,
    interquartile_mean,
    median,
    midrange,
    mode,
    quantile,
    summarize,
)

__all__ = [
    # Version
    "__version__",

    # Errors
    "InvalidParameterError",
    "EmptyDataError",

    # Distributions
    "erfc",
    "ierfc",
    "CauchyDistribution",
    "LaplaceDistribution",
    "GaussianDistribution",
    "distribution_from_dict",

    # Location
    "StatisticsOptions",
    "QuantileMethod",
    "LocationSummary",
    "arithmetic_mean",
    "harmonic_mean",
    "interquartile_mean",
    "median",
    "midrange",
    "mode",
    "quantile",
    "summarize",
]
