"""Logging setup for command-line use of the ``glyphplot`` package."""
from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach one stderr handler to the ``glyphplot`` logger.

    stdout is left alone because rendered frames go there.
    """
    logger = logging.getLogger("glyphplot")
    logger.setLevel(level)
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    return logger
