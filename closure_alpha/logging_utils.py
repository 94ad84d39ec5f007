"""
Logging utilities for closure_alpha.

Provides a dedicated logger for demo transcripts.
"""

import logging
from pathlib import Path
from typing import Optional

from closure_alpha.core.paths import LOGS

TRANSCRIPT_LOGGER = "closure_transcript"


def get_transcript_logger(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Get or create the transcript logger.

    Returns a logger that writes to logs/closure_transcript.log with timestamped entries.
    """
    logger = logging.getLogger(TRANSCRIPT_LOGGER)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        logger.propagate = False

        target_dir = log_dir or LOGS
        target_dir.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(target_dir / "closure_transcript.log", mode="a", encoding="utf-8")
        fmt = logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        fh.setFormatter(fmt)

        logger.addHandler(fh)

    return logger
