"""Logger hierarchy and handler setup for the vuecheck CLI."""

from __future__ import annotations

import logging

_LOGGER_NAME = "vuecheck"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the vuecheck hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the vuecheck logger with a single stderr handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # One handler per process, even across repeated CLI invocations.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[vuecheck] %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
