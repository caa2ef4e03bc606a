# chanlik/analysis/metrics.py

"""Summary metrics per channel (used by the evaluation scripts)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import torch

from chanlik.analysis.normalization import default_grid, integrate_density, symmetry_error, total_mass
from chanlik.models.base import Channel
from chanlik.models.binary import BinarySymmetricChannel
from chanlik.models.composite import MultiChannel
from chanlik.models.deterministic import NoiselessChannel, ShiftChannel
from chanlik.utils.tensor_utils import as_symbol


def resolve(channel: Channel, input: Any) -> Channel:
    """The channel that actually answers queries for `input`."""
    if isinstance(channel, MultiChannel):
        return resolve(channel.channel_for(input), input)
    return channel


def is_discrete(channel: Channel, input: Any = None) -> bool:
    """True when p(. | input) is a mass rather than a density."""
    if input is not None:
        channel = resolve(channel, input)
    return isinstance(channel, (NoiselessChannel, ShiftChannel, BinarySymmetricChannel))


def default_alphabet(channel: Channel, input: Any) -> List[Any]:
    """Outputs carrying all the mass of a discrete channel for `input`."""
    target = resolve(channel, input)
    if isinstance(target, BinarySymmetricChannel):
        return [False, True]
    if isinstance(target, ShiftChannel):
        return [float(input) - target.offset]
    return [input]


@torch.no_grad()
def compute_density_metrics(channel: Channel,
                            input: Any,
                            num_points: int = 20001,
                            span: float = 12.0,
                            alphabet: Optional[Sequence[Any]] = None,
                            device: Optional[torch.device] = None) -> Dict[str, float]:
    """Peak value, total mass / integral and symmetry error for one input."""
    if is_discrete(channel, input):
        alphabet = list(alphabet) if alphabet is not None else default_alphabet(channel, input)
        probs = channel.probability_of(as_symbol(alphabet), input)
        return {
            "peak": float(probs.max().item()),
            "mass": total_mass(channel, input, alphabet),
            "symmetry_error": 0.0,
        }

    target = resolve(channel, input)
    grid = default_grid(target, input, num_points=num_points, span=span, device=device)
    p = channel.probability_of(grid, input)
    center = float(input) + float(getattr(target, "mean", 0.0))
    offsets = grid[grid >= center] - center
    return {
        "peak": float(p.max().item()),
        "mass": integrate_density(channel, input, grid),
        "symmetry_error": symmetry_error(target, input, offsets, center=center),
    }
