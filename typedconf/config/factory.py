"""
Construction Helpers

Bind a Config to each provider with sensible path defaults.
"""

from typing import Any, Mapping, Union

from typedconf.config.config import Config
from typedconf.config.settings import SourceSettings
from typedconf.providers.document_provider import (
    DEFAULT_ENV_VAR, JsonConfigProvider, YamlConfigProvider
)
from typedconf.providers.dotenv_provider import DotEnvConfigProvider


def create_config(provider) -> Config:
    return Config(provider)


def create_dotenv_config(dotenv_path='.env') -> Config:
    """Config backed by a .env file found in cwd or one of its parents."""
    return Config(DotEnvConfigProvider(dotenv_path))


def create_json_config(json_path, env_var: str = DEFAULT_ENV_VAR) -> Config:
    """Config backed by a JSON file; env_var may point somewhere else."""
    return Config(JsonConfigProvider(json_path, env_var=env_var))


def create_yaml_config(yaml_path, env_var: str = DEFAULT_ENV_VAR) -> Config:
    """Config backed by a YAML file; env_var may point somewhere else."""
    return Config(YamlConfigProvider(yaml_path, env_var=env_var))


def build_config(settings: Union[SourceSettings, Mapping[str, Any]]) -> Config:
    """
    Build a Config from explicit source settings.

    Args:
        settings: SourceSettings or a mapping accepted by it

    Returns:
        Config bound to the described source

    Raises:
        ValidationError: If the settings are invalid

    Example:
        config = build_config({'kind': 'json', 'path': 'config/app.json'})
    """
    if not isinstance(settings, SourceSettings):
        settings = SourceSettings.model_validate(settings)

    if settings.kind == 'dotenv':
        return create_dotenv_config(settings.path or '.env')
    if settings.kind == 'json':
        return create_json_config(settings.path, env_var=settings.env_var)
    return create_yaml_config(settings.path, env_var=settings.env_var)
