"""
Property-based tests using Hypothesis.

Checks the invariants of the distribution models over randomly generated
parameters: density symmetry, quantile/CDF inversion, the erfc reflection
identity and the Gaussian algebra.
"""

import math

import pytest
from hypothesis import given, settings, strategies as st

from geoid_statistics.core.distributions import (
    CauchyDistribution,
    LaplaceDistribution,
    GaussianDistribution,
    erfc,
    ierfc,
)

locations = st.floats(min_value=-100.0, max_value=100.0)
spreads = st.floats(min_value=0.1, max_value=100.0)
offsets = st.floats(min_value=0.0, max_value=10.0)
probabilities = st.floats(min_value=0.01, max_value=0.99)


@given(locations, spreads, offsets)
@settings(max_examples=100, deadline=None)
def test_gaussian_pdf_symmetric(mean, variance, d):
    g = GaussianDistribution(mean, variance)
    assert g.pdf(mean + d) == pytest.approx(g.pdf(mean - d), rel=1e-9)


@given(locations, spreads, offsets)
@settings(max_examples=100, deadline=None)
def test_laplace_pdf_symmetric(mean, variance, d):
    dist = LaplaceDistribution(mean, variance)
    assert dist.pdf(mean + d) == pytest.approx(dist.pdf(mean - d), rel=1e-9)


@given(locations, spreads, offsets)
@settings(max_examples=100, deadline=None)
def test_cauchy_pdf_symmetric(x0, gamma, d):
    dist = CauchyDistribution(x0, gamma)
    assert dist.pdf(x0 + d) == pytest.approx(dist.pdf(x0 - d), rel=1e-9)


@given(locations, spreads, probabilities)
@settings(max_examples=100, deadline=None)
def test_cdf_inverts_ppf(location, spread, p):
    for dist in (
        GaussianDistribution(location, spread),
        LaplaceDistribution(location, spread),
        CauchyDistribution(location, spread),
    ):
        assert dist.cdf(dist.ppf(p)) == pytest.approx(p, abs=1e-6)


@given(st.floats(min_value=-50.0, max_value=50.0))
@settings(max_examples=200, deadline=None)
def test_erfc_reflection(x):
    assert erfc(x) + erfc(-x) == pytest.approx(2.0, abs=1e-6)


@given(st.floats(min_value=-3.0, max_value=3.0))
@settings(max_examples=200, deadline=None)
def test_ierfc_inverts_erfc(x):
    assert ierfc(erfc(x)) == pytest.approx(x, abs=1e-4)


@given(st.floats(allow_nan=False))
@settings(max_examples=100, deadline=None)
def test_erfc_bounded(x):
    assert 0.0 <= erfc(x) <= 2.0


@given(locations, spreads, locations, spreads)
@settings(max_examples=100, deadline=None)
def test_add_sub_keeps_mean_and_grows_variance(m1, v1, m2, v2):
    g = GaussianDistribution(m1, v1)
    h = GaussianDistribution(m2, v2)
    r = g.add(h).sub(h)
    assert r.mean == pytest.approx(g.mean, abs=1e-9)
    assert r.variance > g.variance


@given(locations, spreads, st.floats(min_value=0.01, max_value=100.0))
@settings(max_examples=100, deadline=None)
def test_scale_transforms_parameters(mean, variance, c):
    s = GaussianDistribution(mean, variance).scale(c)
    assert s.mean == mean * c
    assert s.variance == variance * c * c


@given(locations, spreads, locations, spreads)
@settings(max_examples=100, deadline=None)
def test_fusion_never_increases_variance(m1, v1, m2, v2):
    fused = GaussianDistribution(m1, v1).mul(GaussianDistribution(m2, v2))
    assert fused.variance <= min(v1, v2) * (1.0 + 1e-12)
    assert min(m1, m2) - 1e-9 <= fused.mean <= max(m1, m2) + 1e-9
    assert math.isfinite(fused.standard_deviation)
