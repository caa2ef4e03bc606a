# chanlik/analysis/normalization.py

"""Normalization checks.

For a fixed input a density must integrate to 1 over the output domain and a
mass must sum to 1 over the output alphabet. These helpers evaluate that
numerically for any Channel.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

import torch

from chanlik.models.base import Channel
from chanlik.models.deterministic import ShiftChannel
from chanlik.utils.tensor_utils import as_float64, as_symbol


def default_grid(channel: Channel,
                 input: float,
                 num_points: int = 20001,
                 span: float = 12.0,
                 device: Optional[torch.device] = None) -> torch.Tensor:
    """Uniform output grid centred where the density of `channel` lives.

    span is measured in noise standard deviations (1 for channels without a
    variance). AGN and AGGN shift the centre by their mean.
    """
    center = float(input) + float(getattr(channel, "mean", 0.0))  # AGN / AGGN peak at i + mean
    if isinstance(channel, ShiftChannel):
        center = float(input) - channel.offset
    sigma = math.sqrt(float(getattr(channel, "variance", 1.0)))
    half = span * sigma
    return torch.linspace(center - half, center + half, num_points, dtype=torch.float64, device=device)


def integrate_density(channel: Channel, input: Any, grid: torch.Tensor) -> float:
    """Trapezoidal integral of p(o | input) over a 1-D output grid."""
    grid = as_float64(grid)
    p = channel.probability_of(grid, input)
    return float(torch.trapezoid(p, grid).item())


def total_mass(channel: Channel, input: Any, alphabet: Iterable[Any]) -> float:
    """Sum of p(o | input) over a finite output alphabet."""
    outputs = as_symbol(list(alphabet))
    return float(channel.probability_of(outputs, input).sum().item())


def symmetry_error(channel: Channel,
                   input: float,
                   offsets: torch.Tensor,
                   center: Optional[float] = None) -> float:
    """max |p(c + d | i) - p(c - d | i)| over the given offsets (c defaults to i)."""
    d = as_float64(offsets)
    i = float(input)
    c = i if center is None else float(center)
    lhs = channel.probability_of(c + d, i)
    rhs = channel.probability_of(c - d, i)
    return float(torch.max(torch.abs(lhs - rhs)).item())
