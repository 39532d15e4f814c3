"""
Configuration Module

Config facade, schema markers and construction helpers.
"""

from typedconf.config.config import Config, REQUIRED
from typedconf.config.factory import (
    build_config, create_config, create_dotenv_config, create_json_config, create_yaml_config
)
from typedconf.config.settings import LoggingSettings, SourceSettings

__all__ = [
    'Config',
    'REQUIRED',
    'build_config',
    'create_config',
    'create_dotenv_config',
    'create_json_config',
    'create_yaml_config',
    'LoggingSettings',
    'SourceSettings',
]
