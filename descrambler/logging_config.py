"""Logging helpers for configuring per-run debug outputs."""

from __future__ import annotations

import logging
from pathlib import Path

__all__ = [
    "configure_debug_file_logger",
    "close_debug_logger",
]

_MARKER = "_descrambler_debug_dump"


def configure_debug_file_logger(
    name: str,
    path: Path,
    *,
    level: int = logging.DEBUG,
    formatter: logging.Formatter | None = None,
) -> logging.Logger:
    """Return a logger writing debug traces to ``path``.

    Any previously configured debug handlers on ``name`` are removed so repeated
    invocations replace earlier traces instead of appending to them.  The file
    is opened in text mode with UTF-8 encoding.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    _remove_debug_handlers(logger)

    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    setattr(handler, _MARKER, True)
    handler.setLevel(level)
    if formatter is None:
        formatter = logging.Formatter("%(name)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def close_debug_logger(logger: logging.Logger) -> None:
    """Tear down debug handlers installed by :func:`configure_debug_file_logger`."""

    _remove_debug_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _remove_debug_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _MARKER, False):
            logger.removeHandler(handler)
            handler.close()
