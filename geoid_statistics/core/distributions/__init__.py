"""Closed-form probability distribution models.

- Cauchy, Laplace and Gaussian distributions with pdf/cdf/ppf
- Complementary error function and its inverse
- Gaussian belief algebra (precision-space fusion, sums, scaling)

No SciPy dependency is required.
"""

from .erf import erfc, ierfc, IERFC_SATURATION
from .base import ContinuousDistribution, DistributionType
from .cauchy import CauchyDistribution
from .laplace import LaplaceDistribution
from .gaussian import GaussianDistribution
from .factory import distribution_from_dict

__all__ = [
    "erfc",
    "ierfc",
    "IERFC_SATURATION",
    "ContinuousDistribution",
    "DistributionType",
    "CauchyDistribution",
    "LaplaceDistribution",
    "GaussianDistribution",
    "distribution_from_dict",
]
