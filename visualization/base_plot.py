# visualization/base_plot.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns


@dataclass(frozen=True)
class PlotConfig:
    save_dir: str = "figures"
    formats: tuple = ("png", "pdf")
    dpi: int = 200
    seaborn_theme: str = "whitegrid"  # configs/base.yaml default


def setup_theme(cfg: PlotConfig) -> None:
    """Apply one theme to every figure."""
    sns.set_theme(style=cfg.seaborn_theme)  # same look for every density figure


def ensure_dir(path: str | Path) -> Path:
    """Create the figure directory if needed."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def save_figure(fig: plt.Figure, out_dir: str | Path, name: str, cfg: PlotConfig) -> None:
    out = ensure_dir(out_dir)
    for fmt in cfg.formats:
        fig.savefig(out / f"{name}.{fmt}", dpi=cfg.dpi, bbox_inches="tight")  # tight box keeps legends inside
