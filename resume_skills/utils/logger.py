"""Logging setup shared by the panel modules.

Modules log through children of the ``resume_skills`` logger; the page calls
``configure_logging`` once so only that package logger owns a handler.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "resume_skills"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = "INFO", stream=None) -> logging.Logger:
    """Attach the stdout handler to the package logger (once) and set its level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_resume_skills", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler._resume_skills = True
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
