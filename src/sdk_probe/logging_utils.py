"""Logging helpers for probe progress and fault tracebacks."""

from __future__ import annotations

import logging


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure root logging once for the probe runtime.

    Report text is printed to stdout; the logger only carries step markers and
    tracebacks of caught filesystem faults, so it writes to stderr.
    """
    normalized = (level or "INFO").upper()
    log_level = getattr(logging, normalized, logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.ERROR)

    logger = logging.getLogger("sdk_probe")
    logger.setLevel(log_level)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(log_level)

    return logger
