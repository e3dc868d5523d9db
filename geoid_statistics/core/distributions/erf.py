"""geoid_statistics.core.distributions.erf

Complementary error function and its inverse (no SciPy).

Implemented:
- ``erfc`` via the Chebyshev-fitted rational/exponential approximation from
  Numerical Recipes in C, 2nd ed. (p. 221); fractional error below 1.2e-7
  everywhere.
- ``ierfc`` via the initial rational estimate from Numerical Recipes, 3rd ed.
  (p. 265), refined with a fixed number of Halley steps on ``erfc`` itself.

``ierfc`` saturates instead of diverging: inputs at or beyond the open
interval (0, 2) map to the sentinels +/-100. Gaussian quantiles inherit this,
so distribution tails never raise.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

# Saturation sentinels for ierfc outside (0, 2)
IERFC_SATURATION: float = 100.0

# Refinement steps in ierfc; two steps reach double precision
IERFC_REFINEMENT_STEPS: int = 2

_TWO_OVER_SQRT_PI = 1.1283791670955126


def erfc(x: float) -> float:
    """Complementary error function ``1 - erf(x)``.

    Args:
        x: any real value

    Returns:
        erfc(x) in [0, 2]
    """
    z = abs(x)
    t = 1.0 / (1.0 + z / 2.0)
    r = t * math.exp(
        -z * z - 1.26551223 + t * (1.00002368 + t * (0.37409196 + t * (
            0.09678418 + t * (-0.18628806 + t * (0.27886807 + t * (
                -1.13520398 + t * (1.48851587 + t * (
                    -0.82215223 + t * 0.17087277))))))))
    )
    return r if x >= 0 else 2.0 - r


def ierfc(x: float) -> float:
    """Inverse of the complementary error function.

    Args:
        x: value of erfc, meaningful in (0, 2)

    Returns:
        y such that erfc(y) = x; -100 for x >= 2 and +100 for x <= 0
    """
    if x >= 2.0:
        logger.debug("ierfc(%r) at or above 2; saturating to %r", x, -IERFC_SATURATION)
        return -IERFC_SATURATION
    if x <= 0.0:
        logger.debug("ierfc(%r) at or below 0; saturating to %r", x, IERFC_SATURATION)
        return IERFC_SATURATION

    xx = x if x < 1.0 else 2.0 - x
    t = math.sqrt(-2.0 * math.log(xx / 2.0))

    # Initial guess
    r = -0.70711 * ((2.30753 + t * 0.27061) / (1.0 + t * (0.99229 + t * 0.04481)) - t)

    for _ in range(IERFC_REFINEMENT_STEPS):
        err = erfc(r) - xx
        r += err / (_TWO_OVER_SQRT_PI * math.exp(-(r * r)) - r * err)

    return r if x < 1.0 else -r
