# chanlik/utils/math_utils.py

"""Numeric layer for the channel likelihood models.

Design principles:
- Pure PyTorch, float64 everywhere densities are evaluated
- Fully batch compatible
- Numerically stable (no nan/inf leaking out of exponentials)
- No channel-specific logic here
"""

import math
import sys

import torch


# ============================================================
# Constants
# ============================================================

PI = math.pi
SQRT_TWO_PI = math.sqrt(2.0 * math.pi)

# exp(x) for x below this is subnormal or zero in float64
EXP_UNDERFLOW = math.log(sys.float_info.min)


# ============================================================
# Core Mathematical Operations
# ============================================================

def safe_exp(x: torch.Tensor) -> torch.Tensor:
    """exp() that saturates to exactly 0 on underflow and on nan exponents."""
    out = torch.exp(torch.clamp(x, min=EXP_UNDERFLOW))
    dead = torch.isnan(x) | (x < EXP_UNDERFLOW)
    return torch.where(dead, torch.zeros_like(out), out)  # nan comes from inf - inf deviations


def log_gamma(x: float) -> float:
    """ln|Γ(x)| evaluated in float64."""
    return float(torch.lgamma(torch.tensor(x, dtype=torch.float64)).item())


def safe_log(x: torch.Tensor, eps: float = 1e-300) -> torch.Tensor:
    """Natural log with a floor so log(0) stays finite."""
    return torch.log(torch.clamp(x, min=eps))
