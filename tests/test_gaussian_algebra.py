import math

import pytest

from geoid_statistics.core.errors import InvalidParameterError
from geoid_statistics.core.distributions import GaussianDistribution


class TestSumAndDifference:
    """Sums and differences of independent Gaussian variables."""

    def test_add(self):
        s = GaussianDistribution(1.0, 2.0).add(GaussianDistribution(3.0, 4.0))
        assert (s.mean, s.variance) == (4.0, 6.0)

    def test_sub_adds_variances(self):
        d = GaussianDistribution(1.0, 2.0).sub(GaussianDistribution(3.0, 4.0))
        assert (d.mean, d.variance) == (-2.0, 6.0)

    def test_add_then_sub_recovers_mean_but_not_variance(self):
        g = GaussianDistribution(1.5, 2.0)
        h = GaussianDistribution(-4.0, 0.5)
        r = g.add(h).sub(h)
        assert r.mean == pytest.approx(g.mean)
        assert r.variance > g.variance
        assert r.variance == pytest.approx(g.variance + 2.0 * h.variance)

    def test_operands_are_not_mutated(self):
        g = GaussianDistribution(1.0, 2.0)
        h = GaussianDistribution(3.0, 4.0)
        g.add(h)
        g.mul(h)
        g.scale(3.0)
        assert g == GaussianDistribution(1.0, 2.0)
        assert h == GaussianDistribution(3.0, 4.0)


class TestScale:
    """Scaling by constants."""

    @pytest.mark.parametrize("c", [3.0, -2.0, 0.5])
    def test_scale(self, c):
        g = GaussianDistribution(1.0, 2.0)
        s = g.scale(c)
        assert s.mean == g.mean * c
        assert s.variance == g.variance * c * c

    def test_scaled_density_transform(self):
        g = GaussianDistribution(0.5, 1.5)
        c = 2.5
        s = g.mul(c)
        for x in (-2.0, 0.0, 0.5, 3.0):
            assert s.pdf(c * x) * c == pytest.approx(g.pdf(x), rel=1e-12)

    def test_scalar_mul_is_scale(self):
        g = GaussianDistribution(1.0, 2.0)
        assert g.mul(2.0) == g.scale(2.0)

    def test_scalar_div_is_inverse_scale(self):
        g = GaussianDistribution(1.0, 2.0)
        q = g.div(2.0)
        assert (q.mean, q.variance) == (0.5, 0.5)

    def test_scale_by_zero_is_invalid(self):
        with pytest.raises(InvalidParameterError):
            GaussianDistribution(1.0, 2.0).scale(0.0)

    def test_div_by_zero_scalar_is_invalid(self):
        with pytest.raises(InvalidParameterError, match="divide a Gaussian by zero"):
            GaussianDistribution(1.0, 2.0).div(0)


class TestPrecisionFusion:
    """Product and quotient in precision space."""

    def test_from_precision_mean(self):
        g = GaussianDistribution.from_precision_mean(4.0, 8.0)
        assert (g.mean, g.variance) == (2.0, 0.25)

    def test_from_precision_mean_on_instance(self):
        g = GaussianDistribution(0.0, 1.0).from_precision_mean(2.0, 1.0)
        assert (g.mean, g.variance) == (0.5, 0.5)

    @pytest.mark.parametrize("precision", [0.0, -1.0, math.nan])
    def test_from_precision_mean_rejects_non_positive_precision(self, precision):
        with pytest.raises(InvalidParameterError, match="Precision must be > 0"):
            GaussianDistribution.from_precision_mean(precision, 1.0)

    def test_mul_fuses_beliefs(self):
        fused = GaussianDistribution(0.0, 1.0).mul(GaussianDistribution(2.0, 1.0))
        assert (fused.mean, fused.variance) == (1.0, 0.5)

    def test_mul_weights_by_precision(self):
        sharp = GaussianDistribution(10.0, 0.01)
        vague = GaussianDistribution(0.0, 100.0)
        fused = sharp.mul(vague)
        assert fused.variance < sharp.variance
        assert fused.mean == pytest.approx(10.0, abs=1e-2)

    def test_mul_is_commutative(self):
        g = GaussianDistribution(1.0, 2.0)
        h = GaussianDistribution(-3.0, 0.7)
        a, b = g.mul(h), h.mul(g)
        assert a.mean == pytest.approx(b.mean)
        assert a.variance == pytest.approx(b.variance)

    def test_div(self):
        q = GaussianDistribution(1.0, 0.5).div(GaussianDistribution(2.0, 1.0))
        assert (q.mean, q.variance) == (0.0, 1.0)

    def test_div_undoes_mul(self):
        g = GaussianDistribution(0.3, 1.7)
        h = GaussianDistribution(-2.0, 4.2)
        r = g.mul(h).div(h)
        assert r.mean == pytest.approx(g.mean)
        assert r.variance == pytest.approx(g.variance)

    def test_div_with_equal_precision_is_invalid(self):
        with pytest.raises(InvalidParameterError):
            GaussianDistribution(0.0, 1.0).div(GaussianDistribution(5.0, 1.0))

    def test_div_by_sharper_belief_is_invalid(self):
        with pytest.raises(InvalidParameterError):
            GaussianDistribution(0.0, 4.0).div(GaussianDistribution(0.0, 1.0))


class TestOperators:
    """Python operators delegate to the named operations."""

    def test_operators(self):
        g = GaussianDistribution(1.0, 2.0)
        h = GaussianDistribution(3.0, 4.0)
        assert g + h == g.add(h)
        assert g - h == g.sub(h)
        assert g * h == g.mul(h)
        assert g * 3 == g.scale(3)
        assert 3 * g == g.scale(3)
        assert g / 2 == g.div(2)
        assert g.mul(h) / h == g.mul(h).div(h)

    def test_unsupported_operands(self):
        g = GaussianDistribution(1.0, 2.0)
        with pytest.raises(TypeError):
            g + 1.0
        with pytest.raises(TypeError):
            g * "2"
        with pytest.raises(TypeError):
            1.0 - g
