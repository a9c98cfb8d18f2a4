"""Logging helpers for asdf-direnv."""

from __future__ import annotations

import logging

from .core import Settings


def get_logger(name: str, settings: Settings) -> logging.Logger:
    """Configure and return a logger."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # stderr, so traces never end up in captured stdout
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    ch.setLevel(level)
    logger.addHandler(ch)

    logger.propagate = False
    return logger
