"""Run artifacts: directories, CSV rows and markdown reports."""
