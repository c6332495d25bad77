"""Logging utilities for the line engine."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    At ``logging.DEBUG`` the engine traces every split: each filled cell
    reports the next undecided run start, each ``RangeQueue.harvest`` call
    reports its boundary, the captured ``(offset, length)`` pairs and the
    updated start, and ``Hint.refine`` reports the windows before and after.
    Hint overflow is reported at ERROR before the exception is raised.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``picross`` namespace.

    Module loggers are created at import time, so the first call installs
    the default handler when the host application has not configured one.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "picross")
