# chanlik/analysis/llr.py

"""Log-likelihood ratios for binary-input decoders.

    LLR(o) = log p(o | zero_symbol) - log p(o | one_symbol)

Positive values favour bit 0 (the BPSK convention 0 -> +1, 1 -> -1 used by
min-sum decoders). Results are clipped to [-clip, clip] like decoder inputs
usually are; zero likelihoods are floored before the log so a deterministic
or saturated channel yields +-clip instead of inf / nan.
"""

from __future__ import annotations

from typing import Any

import torch

from chanlik.models.base import Channel
from chanlik.utils.math_utils import safe_log


def log_likelihood_ratio(channel: Channel,
                         output: Any,
                         zero_symbol: Any = 1.0,
                         one_symbol: Any = -1.0,
                         clip: float = 100.0) -> torch.Tensor:
    p0 = channel.probability_of(output, zero_symbol)
    p1 = channel.probability_of(output, one_symbol)
    llr = safe_log(p0) - safe_log(p1)
    return torch.clamp(llr, -clip, clip)


def awgn_bpsk_llr(output: Any, variance: float, clip: float = 100.0) -> torch.Tensor:
    """Closed form for AWGN with +-1 symbols: 2 o / variance (reference value)."""
    o = torch.as_tensor(output, dtype=torch.float64)
    return torch.clamp(2.0 * o / variance, -clip, clip)


def hard_decision(llr: torch.Tensor) -> torch.Tensor:
    """Bit decisions from LLRs (negative -> 1)."""
    return (llr < 0).to(torch.int64)
