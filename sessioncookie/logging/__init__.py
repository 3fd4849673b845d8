"""
Logging Package
Structured logging with security features

Provides drop-in replacement for standard logging that uses
structured JSON logging with sensitive data filtering.
"""
from sessioncookie.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'ROOT_LOGGER_NAME',
]

# Every framework logger hangs below this name so one setup_logger() call
# configures all of them
ROOT_LOGGER_NAME = 'sessioncookie'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the framework namespace are moved under it, so handlers
    installed by LoggerConfig.setup_logger(ROOT_LOGGER_NAME) apply.

    Example:
        from sessioncookie.logging import getLogger
        logger = getLogger(__name__)
        logger.info("Something happened")
    """
    # Allow Sanic's own loggers through untouched
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
