# chanlik/utils/errors.py

"""Exception hierarchy.

Everything raised on purpose by the package derives from ChannelError, and
also from the builtin a caller would naturally catch (ValueError / KeyError).
"""

from __future__ import annotations

import math


class ChannelError(Exception):
    """Base class for all channel-model errors."""


class InvalidParameterError(ChannelError, ValueError):
    """A construction-time precondition was violated."""


class UnmappedInputError(ChannelError, KeyError):
    """MultiChannel was queried with an input that has no sub-channel."""

    def __init__(self, input_value):
        super().__init__(input_value)
        self.input_value = input_value

    def __str__(self) -> str:
        return f"no sub-channel registered for input {self.input_value!r}"


def require_finite(name: str, value: float) -> float:
    """Return value as float, or raise if it is nan/inf."""
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}") from exc
    if not math.isfinite(v):
        raise InvalidParameterError(f"{name} must be finite, got {v}")  # nan would poison every density silently
    return v


def require_positive(name: str, value: float) -> float:
    """Finite and strictly positive (variances, shapes)."""
    v = require_finite(name, value)
    if v <= 0.0:
        raise InvalidParameterError(f"{name} must be > 0, got {v}")
    return v


def require_probability(name: str, value: float) -> float:
    """Finite and inside the closed interval [0, 1]."""
    v = require_finite(name, value)
    if not 0.0 <= v <= 1.0:
        raise InvalidParameterError(f"{name} must lie in [0, 1], got {v}")
    return v
