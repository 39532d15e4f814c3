"""
typedconf

Typed, validated access to settings stored in .env, JSON or YAML files.
"""

from typedconf.config import (
    Config,
    REQUIRED,
    LoggingSettings,
    SourceSettings,
    build_config,
    create_config,
    create_dotenv_config,
    create_json_config,
    create_yaml_config,
)
from typedconf.providers import (
    MISSING,
    ConfigProvider,
    DocumentConfigProvider,
    DotEnvConfigProvider,
    JsonConfigProvider,
    YamlConfigProvider,
)
from typedconf.utils.exceptions import (
    ConfigError,
    ConfigPropertyDoesNotExistError,
    ConfigSourceMalformedError,
    ConfigSourceNotFoundError,
    UnsupportedOperationError,
)
from typedconf.utils.logger import setup_logging

__version__ = '0.1.0'

__all__ = [
    'Config',
    'REQUIRED',
    'MISSING',
    'LoggingSettings',
    'SourceSettings',
    'build_config',
    'create_config',
    'create_dotenv_config',
    'create_json_config',
    'create_yaml_config',
    'ConfigProvider',
    'DocumentConfigProvider',
    'DotEnvConfigProvider',
    'JsonConfigProvider',
    'YamlConfigProvider',
    'ConfigError',
    'ConfigPropertyDoesNotExistError',
    'ConfigSourceMalformedError',
    'ConfigSourceNotFoundError',
    'UnsupportedOperationError',
    'setup_logging',
]
