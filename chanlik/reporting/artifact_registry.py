from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class ArtifactPaths:
    root: Path
    results: Path
    figures: Path
    reports: Path

    @staticmethod
    def make(root: str | Path) -> "ArtifactPaths":
        r = Path(root)
        p = ArtifactPaths(
            root=r,
            results=r / "results",
            figures=r / "figures",
            reports=r / "reports",
        )
        for d in [p.results, p.figures, p.reports]:
            d.mkdir(parents=True, exist_ok=True)
        return p


def append_csv_row(path: str | Path, row: Dict) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    write_header = not p.exists()
    with p.open("a", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)
