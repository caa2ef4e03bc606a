# chanlik/models/gaussian.py

"""Gaussian-noise channels.

Both variants precompute their constants once so that a query costs one
exp() and a few multiplications:

    AWGN:  p(o|i) = exp(-(o - i)^2 / (2 v)) / (sqrt(v) sqrt(2 pi))
    AGN:   p(o|i) = exp(-((o - m) - i)^2 / (2 v)) / sqrt(2 pi v)

Exponentials go through safe_exp, so huge deviations give exactly 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import torch

from chanlik.models.base import Channel
from chanlik.utils.errors import require_finite, require_positive
from chanlik.utils.math_utils import PI, SQRT_TWO_PI, safe_exp
from chanlik.utils.tensor_utils import as_float64, broadcast_symbols


@dataclass(frozen=True)
class AWGNChannel(Channel):
    """Additive white Gaussian noise, zero mean."""
    variance: float
    half_inv_variance: float = field(init=False, repr=False, compare=False)
    two_pi_deviation: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        v = require_positive("variance", self.variance)
        object.__setattr__(self, "variance", v)
        object.__setattr__(self, "half_inv_variance", 0.5 / v)
        object.__setattr__(self, "two_pi_deviation", math.sqrt(v) * SQRT_TWO_PI)

    @property
    def peak_density(self) -> float:
        return 1.0 / self.two_pi_deviation

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(as_float64(output), as_float64(input))
        d = out - inp
        return safe_exp(-self.half_inv_variance * d * d) / self.two_pi_deviation


@dataclass(frozen=True)
class AGNChannel(Channel):
    """Additive Gaussian noise with a non-zero mean.

    The observed output is input + noise with noise ~ N(mean, variance), i.e.
    the density of (output - mean) centred on the input.
    """
    mean: float
    variance: float
    half_inv_variance: float = field(init=False, repr=False, compare=False)
    inv_two_pi_deviation: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        m = require_finite("mean", self.mean)
        v = require_positive("variance", self.variance)
        object.__setattr__(self, "mean", m)
        object.__setattr__(self, "variance", v)
        object.__setattr__(self, "half_inv_variance", -1.0 / (2.0 * v))  # negative, applied directly
        object.__setattr__(self, "inv_two_pi_deviation", 1.0 / math.sqrt(2.0 * PI * v))

    @property
    def peak_density(self) -> float:
        return self.inv_two_pi_deviation

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(as_float64(output), as_float64(input))
        d = (out - self.mean) - inp
        return safe_exp(self.half_inv_variance * d * d) * self.inv_two_pi_deviation
