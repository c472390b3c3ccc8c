"""Logging for the dashboard core: one 'insights' logger, child loggers per module."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import LOG_LEVEL


def configure_logging(namespace: str = "insights") -> logging.Logger:
    """Attach the stream handler to ``namespace`` once and return the logger.

    Fetch cycles, mutations and CSV export log ``event key=value`` lines here,
    so they land in the Streamlit server log next to its own output.
    """

    logger = logging.getLogger(namespace)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    logger.propagate = False
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Helper to retrieve a child logger."""

    base = configure_logging()
    if child:
        return base.getChild(child)
    return base
