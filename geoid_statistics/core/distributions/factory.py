"""Rebuild distribution models from their dictionary form."""

from __future__ import annotations

import logging
from typing import Any, Dict

from .base import ContinuousDistribution, DistributionType
from .cauchy import CauchyDistribution
from .gaussian import GaussianDistribution
from .laplace import LaplaceDistribution

logger = logging.getLogger(__name__)

_MODELS = {
    DistributionType.CAUCHY: CauchyDistribution,
    DistributionType.LAPLACE: LaplaceDistribution,
    DistributionType.GAUSSIAN: GaussianDistribution,
}


def distribution_from_dict(data: Dict[str, Any]) -> ContinuousDistribution:
    """
    Factory that creates the matching distribution from a dictionary.

    Args:
        data: Dictionary with a ``type`` (or ``distribution``) key and the
            model parameters, as produced by ``to_dict``

    Returns:
        CauchyDistribution, LaplaceDistribution or GaussianDistribution

    Raises:
        ValueError: If the type is unknown
        KeyError: If a required parameter is missing
    """
    dist_type = data.get("type", data.get("distribution", ""))

    if isinstance(dist_type, DistributionType):
        dist_type = dist_type.value

    key = str(dist_type).lower().strip()
    if key == "normal":
        key = DistributionType.GAUSSIAN.value

    try:
        model = _MODELS[DistributionType(key)]
    except ValueError:
        raise ValueError(f"Unknown distribution type: {dist_type}") from None

    logger.debug("Building %s from %s", model.__name__, data)
    return model.from_dict(data)
