# chanlik/utils/logger.py

"""Logging utilities.

Console logging for run feedback, plus an optional file handler so
evaluation runs keep their log next to the results.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logger(name: str = "chanlik",
                 level: str = "INFO",
                 log_file: Optional[str] = None) -> logging.Logger:
    """Create a configured logger."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")  # one line per record, sortable timestamps

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)  # console feedback during runs

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)  # log kept next to the run results

    logger.propagate = False  # root handlers would print every record twice
    return logger
