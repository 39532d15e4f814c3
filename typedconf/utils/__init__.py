"""
Utility Modules

Modules:
    - coercion: Raw text to primitive conversion
    - exceptions: Custom exception types
    - logger: Logging setup
"""

from typedconf.utils.coercion import coerce_value
from typedconf.utils.logger import get_logger, setup_logging
from typedconf.utils.exceptions import *

__all__ = [
    'coerce_value',
    'get_logger',
    'setup_logging',
    'ConfigError',
    'ConfigPropertyDoesNotExistError',
    'ConfigSourceNotFoundError',
    'ConfigSourceMalformedError',
    'UnsupportedOperationError',
]
