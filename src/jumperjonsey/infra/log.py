"""Logging helpers.

Modules grab a logger with ``get_logger(__name__)``. The root logger is
configured once, on first use, with a single stream handler whose level comes
from ``JJ_LOG_LEVEL`` (see ``config.LOG_LEVEL``) unless ``configure`` was
called explicitly, e.g. by the CLI.
"""
from __future__ import annotations

import logging

from jumperjonsey import config

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure(level: str | int | None = None) -> None:
    global _configured
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure()
    return logging.getLogger(name)
