from __future__ import annotations

import argparse
import json
from pathlib import Path

import torch

from chanlik.utils.config_loader import merge_configs, save_config_snapshot
from chanlik.utils.logger import build_logger
from chanlik.utils.tensor_utils import detach_to_cpu, get_torch_device, to_device

from chanlik.analysis.metrics import compute_density_metrics, is_discrete
from chanlik.models.binary import BinarySymmetricChannel
from chanlik.models.factory import build_channels
from chanlik.reporting.artifact_registry import ArtifactPaths, append_csv_row
from chanlik.reporting.run_report import write_markdown_report

from visualization.base_plot import PlotConfig
from visualization.density_plots import plot_densities


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--configs", nargs="+", default=["configs/base.yaml", "configs/channels.yaml"])
    ap.add_argument("--out", default="runs/evaluate_channels")
    ap.add_argument("--channels", nargs="*", default=None, help="subset of channel names (default: all)")
    args = ap.parse_args()

    cfg = merge_configs(args.configs)
    device = get_torch_device(cfg["device"]["prefer"])
    logger = build_logger("chanlik", cfg["logging"]["level"], f"{args.out}/run.log" if cfg["logging"]["log_to_file"] else None)

    paths = ArtifactPaths.make(args.out)
    save_config_snapshot(cfg, paths.root / "config_merged.yaml")

    ev = cfg["evaluation"]
    vis = cfg["visualization"]
    plot_cfg = PlotConfig(formats=tuple(vis["formats"]), dpi=vis["dpi"], seaborn_theme=vis["seaborn_theme"])

    channels = build_channels(cfg["channels"])
    names = args.channels or list(channels)
    logger.info(f"built {len(channels)} channels, evaluating {names} on {device}")

    lo, hi = ev["plot_range"]
    grid = to_device(torch.linspace(lo, hi, ev["plot_points"], dtype=torch.float64), device)

    results = {}
    failures = []
    for name in names:
        ch = channels[name]
        results[name] = {}
        curves = {}
        inputs = [False, True] if isinstance(ch, BinarySymmetricChannel) else ev["inputs"]
        for x in inputs:
            m = compute_density_metrics(ch, x, num_points=ev["num_points"], span=ev["span"], device=device)
            results[name][str(x)] = m
            append_csv_row(paths.results / "metrics.csv", {"channel": name, "input": x, **m})
            ok = abs(m["mass"] - 1.0) <= ev["mass_tolerance"]
            if not ok:
                failures.append(f"{name}@{x}")
            logger.info(f"channel={name} input={x} peak={m['peak']:.6f} mass={m['mass']:.6f} sym_err={m['symmetry_error']:.2e}")
            if not is_discrete(ch, x):
                curves[f"input={x}"] = detach_to_cpu(ch.probability_of(grid, x))
        if curves:
            plot_densities(detach_to_cpu(grid), curves, paths.figures, name=f"density_{name}", cfg=plot_cfg,
                           title=f"{name}: p(output | input)")

    with open(paths.results / "channel_metrics.json", "w", encoding="utf-8") as f:
        json.dump(results, f, indent=2)

    if failures:
        logger.warning(f"normalization outside tolerance for: {failures}")

    summary = {
        "channels": len(names),
        "inputs": ev["inputs"],
        "mass_tolerance": ev["mass_tolerance"],
        "normalization_failures": failures or "none",
    }
    per_channel = {f"{n} @ {x}": m for n, by_in in results.items() for x, m in by_in.items()}
    report = write_markdown_report(paths.root, "Channel likelihood evaluation", summary, per_channel)
    logger.info(f"report written to {report}")


if __name__ == "__main__":
    main()
