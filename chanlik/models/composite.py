# chanlik/models/composite.py

"""Per-input dispatch over sub-channels.

The table is copied and frozen at construction: lookups never insert, and a
missing input raises UnmappedInputError instead of falling back to a default.
Sub-channels are shared references, so one instance may serve many inputs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Tuple

import torch

from chanlik.models.base import Channel
from chanlik.utils.errors import InvalidParameterError, UnmappedInputError
from chanlik.utils.tensor_utils import broadcast_symbols


def _key(x: Any) -> Hashable:
    """Dictionary key for a symbol (0-d tensors become Python scalars)."""
    if isinstance(x, torch.Tensor):
        if x.numel() != 1:
            raise TypeError(f"expected a single symbol, got a tensor of shape {tuple(x.shape)}")
        return x.item()
    return x


def _rounded(key: Any, dtype: torch.dtype) -> Any:
    """A float table key as it reads after a round trip through `dtype`."""
    if isinstance(key, float):
        return torch.tensor(key, dtype=dtype).item()
    return key


class MultiChannel(Channel):
    """Routes each input symbol to the channel registered for it."""

    def __init__(self, table: Mapping[Any, Channel]):
        if not table:
            raise InvalidParameterError("MultiChannel needs at least one input -> channel entry")
        frozen = {}
        for k, ch in table.items():
            if not isinstance(ch, Channel):
                raise InvalidParameterError(f"entry for input {k!r} is not a Channel: {ch!r}")
            frozen[_key(k)] = ch  # 0-d tensor keys stored as Python scalars
        object.__setattr__(self, "_table", MappingProxyType(frozen))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._table.items())
        return f"MultiChannel({{{inner}}})"

    @property
    def table(self) -> Mapping[Any, Channel]:
        return self._table

    @property
    def inputs(self) -> Tuple[Any, ...]:
        return tuple(self._table)

    def channel_for(self, input: Any, dtype: Optional[torch.dtype] = None) -> Channel:
        """Sub-channel registered for `input` (read-only lookup).

        Inputs from float32 / float16 tensors (or with a given `dtype`) also
        match a float key that rounds to the same value in that precision,
        e.g. torch.tensor(0.1) finds the entry registered under 0.1.
        """
        key = _key(input)
        if key in self._table:
            return self._table[key]
        if dtype is None and isinstance(input, torch.Tensor):
            dtype = input.dtype
        if dtype in (torch.float32, torch.float16, torch.bfloat16):
            for k, ch in self._table.items():
                if _rounded(k, dtype) == key:
                    return ch
        raise UnmappedInputError(key)

    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        out, inp = broadcast_symbols(output, input)
        if inp.dim() == 0:
            return self.channel_for(inp).probability_of(out, inp)

        # resolve every distinct input first so a missing one fails before any work
        channels = {k: self.channel_for(k, inp.dtype) for k in torch.unique(inp).tolist()}
        result = torch.empty(out.shape, dtype=torch.float64, device=out.device)
        for k, ch in channels.items():
            mask = inp == k  # k carries the tensor's own precision
            result[mask] = ch.probability_of(out[mask], inp[mask]).to(torch.float64)
        return result
