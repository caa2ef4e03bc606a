# chanlik/models/generalized.py

"""Additive generalized Gaussian noise (AGGN).

    p(o|i) = a * exp(-|((o - i) - mean) / b|^shape)

    b = sqrt(variance * G(1/shape) / G(3/shape))     scale
    a = 1 / (2 * G(1 + 1/shape) * b)                 normalizer

Since G(1 + 1/s) = G(1/s) / s, `a` equals the textbook normalizer
s / (2 b G(1/s)). shape=2 is the Gaussian, shape=1 the Laplace density;
shape < 2 gives heavier tails, shape > 2 lighter ones.

The gamma terms are taken from log-gamma in float64: G(1/s) alone overflows
for s below ~0.006, while the ratio G(1/s)/G(3/s) stays representable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import torch

from chanlik.models.base import Channel
from chanlik.utils.errors import InvalidParameterError, require_finite, require_positive
from chanlik.utils.math_utils import log_gamma, safe_exp
from chanlik.utils.tensor_utils import as_float64, broadcast_symbols


@dataclass(frozen=True)
class AGGNChannel(Channel):
    """Additive generalized Gaussian noise with mean, variance and shape."""
    mean: float
    variance: float
    shape: float = 2.0
    scale: float = field(init=False, repr=False, compare=False)
    normalizer: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        m = require_finite("mean", self.mean)
        v = require_positive("variance", self.variance)
        s = require_positive("shape", self.shape)

        log_b = 0.5 * (math.log(v) + log_gamma(1.0 / s) - log_gamma(3.0 / s))  # ln b
        log_a = -(math.log(2.0) + log_gamma(1.0 + 1.0 / s) + log_b)  # ln a, still in log space
        try:
            b, a = math.exp(log_b), math.exp(log_a)
        except OverflowError:
            b, a = math.inf, math.inf  # math.exp raises instead of returning inf
        if not (0.0 < b < math.inf and 0.0 < a < math.inf):
            raise InvalidParameterError(
                f"shape={s}, variance={v} give a non-representable density (log scale={log_b:.4g}, log normalizer={log_a:.4g})")

        object.__setattr__(self, "mean", m)
        object.__setattr__(self, "variance", v)
        object.__setattr__(self, "shape", s)
        object.__setattr__(self, "scale", b)
        object.__setattr__(self, "normalizer", a)

    @property
    def peak_density(self) -> float:
        return self.normalizer

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(as_float64(output), as_float64(input))
        z = torch.abs(((out - inp) - self.mean) / self.scale)  # standardized deviation from the peak at i + mean
        return self.normalizer * safe_exp(-torch.pow(z, self.shape))
