import pytest
import torch

from chanlik.analysis.llr import awgn_bpsk_llr, hard_decision, log_likelihood_ratio
from chanlik.analysis.metrics import compute_density_metrics, default_alphabet, is_discrete
from chanlik.analysis.normalization import default_grid, integrate_density, symmetry_error, total_mass
from chanlik.models.binary import BinarySymmetricChannel
from chanlik.models.composite import MultiChannel
from chanlik.models.deterministic import NoiselessChannel, ShiftChannel
from chanlik.models.gaussian import AGNChannel, AWGNChannel
from chanlik.models.generalized import AGGNChannel


def test_llr_matches_awgn_closed_form():
    v = 0.8
    ch = AWGNChannel(variance=v)
    out = torch.linspace(-3.0, 3.0, 61, dtype=torch.float64)
    assert torch.allclose(log_likelihood_ratio(ch, out), awgn_bpsk_llr(out, v), rtol=1e-9, atol=1e-9)


def test_llr_saturates_for_deterministic_channel():
    ch = NoiselessChannel()
    out = torch.tensor([1.0, -1.0, 0.0], dtype=torch.float64)
    llr = log_likelihood_ratio(ch, out, clip=50.0)
    assert llr.tolist() == [50.0, -50.0, 0.0]
    assert torch.isfinite(llr).all()


def test_llr_bsc_and_hard_decision():
    ch = BinarySymmetricChannel(p_flip=0.1)
    llr = log_likelihood_ratio(ch, torch.tensor([False, True]), zero_symbol=False, one_symbol=True)
    assert llr[0].item() == pytest.approx(torch.log(torch.tensor(9.0, dtype=torch.float64)).item())
    assert hard_decision(llr).tolist() == [0, 1]


def test_default_grid_centres_on_mean_and_shift():
    g = default_grid(AGNChannel(mean=2.0, variance=1.0), 1.0, num_points=5, span=2.0)
    assert g.tolist() == pytest.approx([1.0, 2.0, 3.0, 4.0, 5.0])
    g = default_grid(ShiftChannel(offset=0.5), 1.0, num_points=3, span=1.0)
    assert g.tolist() == pytest.approx([-0.5, 0.5, 1.5])


def test_total_mass_discrete():
    assert total_mass(BinarySymmetricChannel(p_flip=0.4), True, [False, True]) == pytest.approx(1.0)
    assert total_mass(NoiselessChannel(), 2, [0, 1, 2, 3]) == 1.0


def test_symmetry_error_with_center():
    ch = AGGNChannel(mean=0.5, variance=1.0, shape=1.5)
    d = torch.linspace(0.0, 4.0, 41, dtype=torch.float64)
    assert symmetry_error(ch, 0.0, d, center=0.5) < 1e-12
    assert symmetry_error(ch, 0.0, d) > 1e-3


def test_density_metrics_continuous():
    m = compute_density_metrics(AWGNChannel(variance=1.0), 0.0)
    assert m["mass"] == pytest.approx(1.0, abs=1e-6)
    assert m["peak"] == pytest.approx(0.3989422804, abs=1e-8)
    assert m["symmetry_error"] < 1e-12


def test_density_metrics_discrete_and_multi():
    assert compute_density_metrics(BinarySymmetricChannel(p_flip=0.2), True)["mass"] == pytest.approx(1.0)
    assert compute_density_metrics(ShiftChannel(offset=0.25), 1.0)["mass"] == 1.0

    multi = MultiChannel({0.0: AGNChannel(mean=1.0, variance=0.5), 1.0: NoiselessChannel()})
    assert is_discrete(multi, 1.0) and not is_discrete(multi, 0.0)
    assert default_alphabet(multi, 1.0) == [1.0]
    assert compute_density_metrics(multi, 0.0)["mass"] == pytest.approx(1.0, abs=1e-6)
    assert compute_density_metrics(multi, 1.0)["mass"] == 1.0


def test_integrate_density_on_explicit_grid():
    ch = AGGNChannel(mean=0.0, variance=1.0, shape=4.0)
    grid = torch.linspace(-10.0, 10.0, 20001, dtype=torch.float64)
    assert integrate_density(ch, 0.0, grid) == pytest.approx(1.0, abs=1e-6)
