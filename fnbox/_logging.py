"""
Logger setup for scripts and examples. The library itself never adds handlers.

Everything in fnbox logs below the `fnbox` logger: `fnbox.trace` carries
`trace` output, `fnbox.task.*` carries task lifecycle at DEBUG. Scripts call
`setup_logger()` once to see them.
"""

import logging
import os
import sys
import typing

__all__ = ["DEFAULT_FORMAT", "setup_logger"]

# Short enough that a traced value stays on one readable line
DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s %(name)s | %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logger(
    name: str = "fnbox",
    level: int | str | None = None,
    format_string: str | None = None,
    stream: typing.TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return a logger with a single stream handler.

    Args:
        name: Logger name (defaults to the package logger)
        level: Level name or number; falls back to the LOG_LEVEL env var, then INFO
        format_string: Custom format string
        stream: Where records go (stdout by default)

    A logger that already has handlers is returned untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False
    return logger
