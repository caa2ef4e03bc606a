import math

import pytest
import torch

from chanlik.analysis.normalization import default_grid, integrate_density
from chanlik.models.gaussian import AWGNChannel
from chanlik.models.generalized import AGGNChannel
from chanlik.utils.errors import InvalidParameterError


def test_shape_two_reduces_to_gaussian():
    for v in [0.25, 1.0, 3.0]:
        aggn = AGGNChannel(mean=0.0, variance=v, shape=2.0)
        awgn = AWGNChannel(variance=v)
        out = torch.linspace(-8.0, 8.0, 321, dtype=torch.float64)
        assert torch.allclose(aggn.probability_of(out, 0.5), awgn.probability_of(out, 0.5), rtol=1e-10, atol=1e-300)


def test_default_shape_is_gaussian():
    assert AGGNChannel(mean=0.0, variance=1.0).shape == 2.0
    assert AGGNChannel(mean=0.0, variance=1.0).peak_density == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=1e-12)


def test_shape_one_is_laplace():
    v = 2.0
    ch = AGGNChannel(mean=0.0, variance=v, shape=1.0)
    b = math.sqrt(v / 2.0)
    assert ch.scale == pytest.approx(b, rel=1e-12)
    x = torch.linspace(-5.0, 5.0, 101, dtype=torch.float64)
    expected = torch.exp(-torch.abs(x) / b) / (2.0 * b)
    assert torch.allclose(ch.probability_of(x, 0.0), expected, rtol=1e-10, atol=0.0)


def test_normalizer_matches_textbook_form():
    # 1 / (2 G(1 + 1/s) b) == s / (2 b G(1/s))
    for s in [0.5, 1.0, 1.5, 3.0, 10.0]:
        ch = AGGNChannel(mean=0.0, variance=1.0, shape=s)
        textbook = s / (2.0 * ch.scale * math.gamma(1.0 / s))
        assert ch.normalizer == pytest.approx(textbook, rel=1e-12)


@pytest.mark.parametrize("shape", [1.0, 1.5, 3.0, 8.0])
def test_density_integrates_to_one(shape):
    ch = AGGNChannel(mean=0.3, variance=1.5, shape=shape)
    grid = default_grid(ch, -0.2, num_points=40001, span=20.0)
    assert integrate_density(ch, -0.2, grid) == pytest.approx(1.0, abs=1e-4)


def test_mean_shifts_peak():
    ch = AGGNChannel(mean=0.25, variance=1.0, shape=1.5)
    assert ch.probability_of(1.25, 1.0).item() == ch.normalizer
    assert ch.probability_of(1.0, 1.0).item() < ch.normalizer


def test_tail_weight_ordering():
    gauss = AGGNChannel(mean=0.0, variance=1.0, shape=2.0)
    heavy = AGGNChannel(mean=0.0, variance=1.0, shape=1.0)
    light = AGGNChannel(mean=0.0, variance=1.0, shape=4.0)
    far = 5.0
    assert heavy.probability_of(far, 0.0).item() > gauss.probability_of(far, 0.0).item()
    assert light.probability_of(far, 0.0).item() < gauss.probability_of(far, 0.0).item()


def test_small_shape_constants_stay_finite():
    # G(3/s) alone overflows here; the log-space ratio does not
    ch = AGGNChannel(mean=0.0, variance=1.0, shape=0.01)
    assert math.isfinite(ch.scale) and ch.scale > 0.0
    assert math.isfinite(ch.normalizer) and ch.normalizer > 0.0
    assert torch.isfinite(ch.probability_of(torch.tensor([0.0, 1.0, 1e6], dtype=torch.float64), 0.0)).all()


def test_unrepresentable_shape_rejected():
    with pytest.raises(InvalidParameterError):
        AGGNChannel(mean=0.0, variance=1.0, shape=1e-3)


@pytest.mark.parametrize("kwargs", [
    dict(mean=0.0, variance=0.0, shape=2.0),
    dict(mean=0.0, variance=1.0, shape=0.0),
    dict(mean=0.0, variance=1.0, shape=-1.0),
    dict(mean=float("inf"), variance=1.0, shape=2.0),
])
def test_rejects_bad_parameters(kwargs):
    with pytest.raises(InvalidParameterError):
        AGGNChannel(**kwargs)


def test_extreme_deviation_is_zero_not_nan():
    ch = AGGNChannel(mean=0.0, variance=1.0, shape=1.0)
    p = ch.probability_of(torch.tensor([1e308, float("inf")], dtype=torch.float64), 0.0)
    assert p.tolist() == [0.0, 0.0]
