from __future__ import annotations

import argparse
import json

import torch

from chanlik.utils.config_loader import merge_configs, save_config_snapshot
from chanlik.utils.logger import build_logger
from chanlik.utils.tensor_utils import detach_to_cpu

from chanlik.analysis.normalization import default_grid, integrate_density
from chanlik.models.gaussian import AGNChannel
from chanlik.models.generalized import AGGNChannel
from chanlik.reporting.artifact_registry import ArtifactPaths

from visualization.base_plot import PlotConfig
from visualization.density_plots import plot_densities, plot_metric_vs_shape


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--configs", nargs="+", default=["configs/base.yaml", "configs/channels.yaml"])
    ap.add_argument("--out", default="runs/sweep_aggn_shape")
    args = ap.parse_args()

    cfg = merge_configs(args.configs)
    logger = build_logger("chanlik", cfg["logging"]["level"], f"{args.out}/run.log" if cfg["logging"]["log_to_file"] else None)

    paths = ArtifactPaths.make(args.out)
    save_config_snapshot(cfg, paths.root / "config_merged.yaml")

    sw = cfg["sweep"]
    ev = cfg["evaluation"]
    vis = cfg["visualization"]
    plot_cfg = PlotConfig(formats=tuple(vis["formats"]), dpi=vis["dpi"], seaborn_theme=vis["seaborn_theme"])

    gauss = AGNChannel(mean=sw["mean"], variance=sw["variance"])
    lo, hi = ev["plot_range"]
    grid = torch.linspace(lo, hi, ev["plot_points"], dtype=torch.float64)
    curves = {"gaussian": detach_to_cpu(gauss.probability_of(grid, 0.0))}

    peaks, masses = [], []
    for s in sw["shapes"]:
        ch = AGGNChannel(mean=sw["mean"], variance=sw["variance"], shape=s)
        # heavy tails need a wider grid to hold the mass
        span = ev["span"] * max(1.0, 2.0 / s)
        mass = integrate_density(ch, 0.0, default_grid(ch, 0.0, num_points=ev["num_points"], span=span))
        peaks.append(ch.peak_density)
        masses.append(mass)
        curves[f"shape={s}"] = detach_to_cpu(ch.probability_of(grid, 0.0))
        logger.info(f"shape={s} scale={ch.scale:.6f} peak={ch.peak_density:.6f} mass={mass:.6f}")

    with open(paths.results / "aggn_shape_sweep.json", "w", encoding="utf-8") as f:
        json.dump({"shapes": sw["shapes"], "peak": peaks, "mass": masses,
                   "gaussian_peak": gauss.peak_density}, f, indent=2)

    plot_densities(detach_to_cpu(grid), curves, paths.figures, name="aggn_family", cfg=plot_cfg,
                   title="Generalized Gaussian family", log_scale=True)
    plot_metric_vs_shape(sw["shapes"], peaks, "Peak density", paths.figures, "aggn_peak_vs_shape",
                         cfg=plot_cfg, reference=gauss.peak_density, title="AGGN peak density vs shape")


if __name__ == "__main__":
    main()
