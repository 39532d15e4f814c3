"""
Logging Infrastructure

Logger factory for library modules plus an opt-in setup helper for
applications that want structured or text output.
"""

import logging
import logging.handlers
import json
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}

logging.getLogger('typedconf').addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON.

    Fields passed with extra= are merged into the top-level object.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """
    Human-readable text formatter for development.
    """

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s [%(levelname)8s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
    format_type: str = 'json',
    console: bool = True,
    logger_name: str = 'typedconf'
) -> logging.Logger:
    """
    Attach handlers to the typedconf logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (None to disable file logging)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup files to keep
        format_type: 'json' or 'text'
        console: Whether to log to stderr
        logger_name: Logger to configure ('' for the root logger)

    Returns:
        The configured logger
    """
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, level.upper()))

    # Replace handlers from an earlier call
    target.handlers = []

    if format_type == 'json':
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        target.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)

    if not target.handlers:
        target.addHandler(logging.NullHandler())

    target.debug(f"Logging initialized: level={level}, format={format_type}, file={log_file}")
    return target


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
