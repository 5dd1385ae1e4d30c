"""Process logger construction.

The logger is built once at startup from ``AppConfig`` and handed to
the App explicitly; nothing in the package reaches for a module-level
logger of its own.
"""

import logging
import sys
from typing import TextIO

from headerecho.config import AppConfig

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Names accepted in LOG_LEVEL, mapped onto stdlib levels.
LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


def resolve_level(name: str) -> int | None:
    """Map a ``LOG_LEVEL`` value to a logging level, or ``None`` if unknown."""
    return LEVELS.get(name.strip().lower())


def configure_logger(config: AppConfig, *, stream: TextIO | None = None) -> logging.Logger:
    """Create the named process logger described by *config*.

    Idempotent: calling it again replaces the handler rather than
    stacking a second one. Unknown levels fall back to INFO and the
    fallback itself is logged as a warning.
    """
    logger = logging.getLogger(config.logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    level = resolve_level(config.log_level)
    if level is None:
        logger.setLevel(logging.INFO)
        logger.warning("Unknown log level %r, using info", config.log_level)
    else:
        logger.setLevel(level)
    return logger
