# chanlik/models/deterministic.py

"""Deterministic channels (exact-match indicators, no randomness)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import torch

from chanlik.models.base import Channel
from chanlik.utils.errors import require_finite
from chanlik.utils.tensor_utils import as_float64, broadcast_symbols, indicator


@dataclass(frozen=True)
class NoiselessChannel(Channel):
    """Identity channel: the output is the input, converted to the output type."""

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(output, input)
        return indicator(out == inp.to(out.dtype))  # int output truncates a float input


@dataclass(frozen=True)
class ShiftChannel(Channel):
    """Deterministic bias: the output is always input - offset."""
    offset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", require_finite("offset", self.offset))

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(as_float64(output), as_float64(input))
        return indicator(out == inp - self.offset)
