"""Logging configuration using loguru.

Intercepts stdlib logging so that httpx and the ``sidekick`` modules all
flow through loguru.  At DEBUG the sink shows timestamps and call sites for
troubleshooting; above it a CLI user only sees ``LEVEL: message``.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

_DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_CLI_FORMAT = "<level>{level}</level>: {message}"


class _InterceptHandler(logging.Handler):
    """Bridge stdlib logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk the call stack so loguru reports the real call-site
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def log_format(level: str) -> str:
    """Sink format for *level*: detailed at DEBUG (or lower), terse otherwise."""
    return _DEBUG_FORMAT if logger.level(level.upper()).no <= logger.level("DEBUG").no else _CLI_FORMAT


def setup_logging(level: str = "WARNING") -> None:
    """Route everything to stderr through loguru; stdout stays for command output."""
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=log_format(level))

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    # httpx logs every request at INFO
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging initialised (level={})", level)
