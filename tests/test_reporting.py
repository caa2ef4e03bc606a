import csv

from chanlik.reporting.artifact_registry import ArtifactPaths, append_csv_row
from chanlik.reporting.run_report import write_markdown_report


def test_artifact_dirs_created(tmp_path):
    ap = ArtifactPaths.make(tmp_path / "run")
    assert ap.results.is_dir() and ap.figures.is_dir() and ap.reports.is_dir()


def test_csv_rows_share_one_header(tmp_path):
    p = tmp_path / "results" / "metrics.csv"
    append_csv_row(p, {"channel": "awgn", "input": 0.0, "mass": 1.0})
    append_csv_row(p, {"channel": "bsc", "input": True, "mass": 1.0})
    with p.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["channel"] for r in rows] == ["awgn", "bsc"]


def test_markdown_report_lists_channels(tmp_path):
    per_channel = {"awgn @ 0.0": {"peak": 0.3989422804, "mass": 1.0, "symmetry_error": 0.0}}
    p = write_markdown_report(tmp_path, "Channel likelihood evaluation", {"channels": 1}, per_channel, notes="ok")
    text = p.read_text(encoding="utf-8")
    assert text.startswith("# Channel likelihood evaluation")
    assert "| awgn @ 0.0 |" in text
    assert "0.398942" in text
