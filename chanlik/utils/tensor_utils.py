# chanlik/utils/tensor_utils.py

"""Tensor helpers: symbol conversion and device handling."""

from __future__ import annotations

from typing import Any, Mapping

import torch


def as_symbol(x: Any) -> torch.Tensor:
    """Convert a scalar or tensor symbol to a tensor.

    Integer and boolean symbols keep their dtype; Python floats become float64
    instead of torch's float32 default.
    """
    if isinstance(x, torch.Tensor):
        return x
    t = torch.as_tensor(x)
    if t.is_floating_point():
        t = t.to(torch.float64)
    return t


def as_float64(x: Any) -> torch.Tensor:
    """Convert a symbol to a float64 tensor (density arithmetic)."""
    return as_symbol(x).to(torch.float64)


def broadcast_symbols(output: Any, input: Any):
    """Tensor-ize and broadcast an (output, input) pair to a common shape."""
    out = as_symbol(output)
    inp = as_symbol(input)
    if inp.device != out.device:
        inp = inp.to(out.device)
    return torch.broadcast_tensors(out, inp)


def indicator(mask: torch.Tensor) -> torch.Tensor:
    """Boolean mask -> float64 {0, 1}."""
    return mask.to(torch.float64)


def to_device(x: Any, device: torch.device) -> Any:
    """Move tensors (and nested containers of tensors) to device."""
    if isinstance(x, torch.Tensor):
        return x.to(device, non_blocking=True)
    if isinstance(x, Mapping):
        return {k: to_device(v, device) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return type(x)(to_device(v, device) for v in x)
    return x


def detach_to_cpu(x: torch.Tensor):
    """Detach and move to CPU for plotting/logging."""
    return x.detach().cpu().numpy()


def get_torch_device(prefer: str = "cuda") -> torch.device:
    """Resolve torch device.

    prefer='cuda' will use GPU if available; otherwise CPU.
    """
    if prefer == "cuda" and torch.cuda.is_available():
        return torch.device("cuda")
    return torch.device("cpu")
