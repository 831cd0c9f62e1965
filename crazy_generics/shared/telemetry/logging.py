"""Logging configuration for crazy-generics"""
import logging
import sys
from typing import TextIO

from crazy_generics.infrastructure.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Root of every logger handed out by get_logger
PACKAGE_LOGGER = "crazy_generics"


def setup_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """
    Configure root logging for an application using the library.

    The level defaults to the one resolved from settings (log_level, then
    debug). Library modules never call this themselves.
    """
    if level is None:
        level = get_settings().effective_log_level()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger, nested under the package logger"""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
