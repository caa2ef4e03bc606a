# chanlik/models/binary.py

"""Binary symmetric channel (BSC)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import torch

from chanlik.models.base import Channel
from chanlik.utils.errors import require_probability
from chanlik.utils.tensor_utils import as_symbol


def _as_bits(x: Any) -> torch.Tensor:
    """Boolean tensor view of a symbol (0/1, bool or tensor)."""
    if isinstance(x, torch.Tensor):
        return x.to(torch.bool)
    return torch.tensor(bool(x))


@dataclass(frozen=True)
class BinarySymmetricChannel(Channel):
    """Two-symbol channel that flips its input with probability p_flip.

    Symbols are booleans; 0/1 integers and tensors are cast to bool first.
    """
    p_flip: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "p_flip", require_probability("p_flip", self.p_flip))

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out = _as_bits(output)
        inp = _as_bits(input).to(out.device)
        keep = torch.tensor(1.0 - self.p_flip, dtype=torch.float64, device=out.device)
        flip = torch.tensor(self.p_flip, dtype=torch.float64, device=out.device)
        return torch.where(out == inp, keep, flip)  # 0-d keep/flip broadcast to the symbol shape

    def transition_matrix(self) -> torch.Tensor:
        """P[i, o] for i, o in (False, True); each row sums to 1."""
        bits = as_symbol([False, True])
        return self.probability_of(bits[None, :], bits[:, None])  # rows: input, columns: output
