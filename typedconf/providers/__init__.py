"""
Configuration Providers

Backing stores answering key lookups for Config.
"""

from typedconf.providers.base import ConfigProvider, MISSING
from typedconf.providers.dotenv_provider import DotEnvConfigProvider, find_env_file
from typedconf.providers.document_provider import (
    DocumentConfigProvider, JsonConfigProvider, YamlConfigProvider
)

__all__ = [
    'ConfigProvider',
    'MISSING',
    'DotEnvConfigProvider',
    'find_env_file',
    'DocumentConfigProvider',
    'JsonConfigProvider',
    'YamlConfigProvider',
]
