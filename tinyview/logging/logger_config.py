"""
Logging Configuration
Structured JSON logging for the view layer
"""
import json
import logging
import logging.handlers
from datetime import datetime
from typing import List, Optional

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'message',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging
    """

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Args:
            include_fields: Additional record attributes to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed with logger.debug(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        log_file: Optional[str] = None,
        max_bytes: int = None,
        backup_count: int = None,
    ) -> logging.Logger:
        """
        Setup a logger for the view layer

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            log_file: Rotating log file path (default: app.LOG_FILE, none if unset)
            max_bytes: Max bytes before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('tinyview', format_type='text')
        """
        from tinyview.defaults import (
            DEFAULT_APP_ENV,
            DEFAULT_LOG_BACKUP_COUNT,
            DEFAULT_LOG_MAX_BYTES,
        )
        from tinyview.support import Config

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT
        if log_file is None:
            log_file = Config.get('app.LOG_FILE')

        app_env = Config.get('app.APP_ENV', DEFAULT_APP_ENV)
        app_debug = Config.get('app.APP_DEBUG', False)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env))
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        if log_file:
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        if app_debug or not log_file:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
