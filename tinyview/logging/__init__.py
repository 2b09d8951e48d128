"""
Logging Package
Structured logging for the view layer
"""
from tinyview.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') and the names listed in
    app.ALLOWED_LOGGERS are passed through; any other bare name is
    mapped to the root logger.

    Example:
        from tinyview.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Rendering %s", path)
    """
    # Sanic's own loggers bypass the restriction
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name:
        from tinyview.support import Config
        allowed_names = Config.get('app.ALLOWED_LOGGERS', ['tinyview'])

        if name not in allowed_names:
            name = None

    return logging.getLogger(name)
