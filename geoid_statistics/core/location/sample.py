"""Input normalization shared by the location estimators."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from ..errors import EmptyDataError
from ..models.options import StatisticsOptions


def as_sample(data: Iterable[float]) -> np.ndarray:
    """Convert any iterable of numbers to a flat float array."""
    if not isinstance(data, np.ndarray):
        data = list(data)
    return np.asarray(data, dtype=float).ravel()


def resolve_options(options: Optional[StatisticsOptions]) -> StatisticsOptions:
    return options if options is not None else StatisticsOptions.default()


def empty_result(options: StatisticsOptions, name: str) -> float:
    """Value returned for empty input, or raise if the options demand it."""
    if options.raise_on_empty:
        raise EmptyDataError(f"{name} requires at least one value")
    return 0.0
