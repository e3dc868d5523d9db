"""geoid_statistics.core.errors

Exception types raised by the statistics core.

Both derive from ``ValueError`` so callers that already guard numeric input
with ``except ValueError`` keep working.
"""


class InvalidParameterError(ValueError):
    """A distribution parameter is outside its valid domain.

    Raised at construction when a scale or variance is not strictly positive,
    and when a precision-space combination yields a non-positive precision.
    """


class EmptyDataError(ValueError):
    """A location estimator received an empty data set."""
