from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional

from chanlik.reporting.artifact_registry import ArtifactPaths


def write_markdown_report(out_dir: str | Path,
                          title: str,
                          summary: Dict,
                          per_channel: Optional[Mapping[str, Mapping[str, float]]] = None,
                          notes: Optional[str] = None) -> Path:
    ap = ArtifactPaths.make(out_dir)
    p = ap.reports / "channel_report.md"

    lines = []
    lines.append(f"# {title}\n")
    lines.append("## Summary\n")
    for k, v in summary.items():
        lines.append(f"- **{k}**: {v}\n")
    if per_channel:
        cols = sorted({c for row in per_channel.values() for c in row})
        lines.append("\n## Channels\n\n")
        lines.append("| channel | " + " | ".join(cols) + " |\n")
        lines.append("|---" * (len(cols) + 1) + "|\n")
        for name, row in per_channel.items():
            cells = [f"{row[c]:.6g}" if isinstance(row.get(c), float) else str(row.get(c, "")) for c in cols]
            lines.append(f"| {name} | " + " | ".join(cells) + " |\n")
    if notes:
        lines.append("\n## Notes\n")
        lines.append(notes + "\n")
    lines.append("\n## Artifacts\n")
    lines.append(f"- Results: `{ap.results}`\n")
    lines.append(f"- Figures: `{ap.figures}`\n")

    p.write_text("".join(lines), encoding="utf-8")
    return p
