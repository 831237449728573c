#!/usr/bin/env python3
"""
logging_setup.py
================
Configures the root logger with a console handler and a rotating file
handler (``junction.log``, 1 MB, 2 backups).

Call :func:`setup_logging` once at startup before the first tick.
"""

import logging
from logging.handlers import RotatingFileHandler

from config import LOG_FILE, SIGNAL_DEBUG_LOG_FILE


def setup_logging(level: int = logging.INFO) -> None:
    """Apply a unified log format to both console and file output.

    Parameters
    ----------
    level : int
        Minimum severity level (e.g. ``logging.DEBUG``, ``logging.INFO``).
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)

    fh = RotatingFileHandler(LOG_FILE, maxBytes=1_000_000, backupCount=2)
    fh.setLevel(level)
    fh.setFormatter(fmt)

    root.handlers.clear()
    root.addHandler(ch)
    root.addHandler(fh)

    # ── Dedicated debug file for every signal phase change ────────────
    signal_logger = logging.getLogger("signal")
    signal_logger.setLevel(logging.DEBUG)
    signal_logger.handlers.clear()
    dfh = RotatingFileHandler(
        SIGNAL_DEBUG_LOG_FILE, maxBytes=5_000_000, backupCount=2
    )
    dfh.setLevel(logging.DEBUG)
    dfh.setFormatter(fmt)
    signal_logger.addHandler(dfh)
