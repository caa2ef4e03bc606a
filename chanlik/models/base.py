# chanlik/models/base.py

"""Channel capability.

A channel maps a transmitted symbol to an observed symbol. The only thing a
decoder needs from it is the likelihood P(output | input):
- a probability mass for discrete outputs (sums to 1 over the alphabet),
- a probability density for continuous outputs (integrates to 1).

Symbols are Python scalars or torch tensors; tensors broadcast elementwise.
Every variant returns a float64 tensor and is frozen after construction, so
instances can be shared freely (including across threads).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import torch


class Channel(ABC):
    """Base class for all channel models."""

    @abstractmethod
    def probability_of(self, output: Any, input: Any) -> torch.Tensor:
        """Likelihood of observing `output` when `input` was transmitted."""
        raise NotImplementedError

    def __call__(self, output: Any, input: Any) -> torch.Tensor:
        return self.probability_of(output, input)
