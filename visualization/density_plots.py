from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

import matplotlib.pyplot as plt

from visualization.base_plot import PlotConfig, setup_theme, save_figure


def plot_densities(grid: Sequence[float],
                   curves: Dict[str, Sequence[float]],
                   out_dir: str | Path,
                   name: str = "densities",
                   cfg: PlotConfig = PlotConfig(),
                   title: str = "p(output | input)",
                   log_scale: bool = False) -> None:
    setup_theme(cfg)
    fig = plt.figure()
    ax = fig.add_subplot(111)
    for label, y in curves.items():
        ax.plot(grid, y, label=label)
    ax.set_xlabel("Output")
    ax.set_ylabel("Density")
    if log_scale:
        ax.set_yscale("log")  # tails
    ax.set_title(title)
    ax.grid(True, which="both")
    ax.legend()
    save_figure(fig, out_dir, name, cfg)
    plt.close(fig)


def plot_metric_vs_shape(shapes: Sequence[float],
                         values: Sequence[float],
                         ylabel: str,
                         out_dir: str | Path,
                         name: str,
                         cfg: PlotConfig = PlotConfig(),
                         reference: float | None = None,
                         title: str = "") -> None:
    setup_theme(cfg)
    fig = plt.figure()
    ax = fig.add_subplot(111)
    ax.plot(shapes, values, marker="o")
    if reference is not None:
        ax.axhline(reference, linestyle="--", color="gray", label="Gaussian")
        ax.legend()
    ax.set_xlabel("Shape")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True)
    save_figure(fig, out_dir, name, cfg)
    plt.close(fig)
