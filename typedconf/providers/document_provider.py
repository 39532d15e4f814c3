"""
Structured-Document Providers

JSON and YAML documents loaded whole at construction and queried with
dot-separated paths ("database.credentials.username").
"""

import copy
import json
import os
from abc import abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from typedconf.providers.base import ConfigProvider, MISSING
from typedconf.utils.exceptions import ConfigSourceMalformedError, ConfigSourceNotFoundError
from typedconf.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENV_VAR = 'CONFIG_PATH'


class DocumentConfigProvider(ConfigProvider):
    """
    Base class for providers backed by a single structured document.

    Subclasses implement parse() and list the exceptions that mean
    "malformed content" in PARSE_ERRORS.

    Note:
        has() is derived from get(): a key is present iff get() does not
        return MISSING. A stored null (None) therefore counts as present.
    """

    FORMAT_NAME = 'document'
    PARSE_ERRORS: tuple = ()

    def __init__(self, path: Union[str, os.PathLike], env_var: str = DEFAULT_ENV_VAR):
        self.requested_path = path
        self.env_var = env_var
        self.path = self.resolve_path(path, env_var)
        self._data = self._load()

    @staticmethod
    def resolve_path(path: Union[str, os.PathLike], env_var: str = DEFAULT_ENV_VAR) -> Path:
        """
        Resolve the effective document location.

        Priority: absolute path, then the env_var override, then path
        relative to the current working directory.
        """
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate

        override = os.environ.get(env_var) if env_var else None
        if override:
            return Path(override).resolve()

        return (Path.cwd() / candidate).resolve()

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse raw document text."""

    def _load(self) -> Any:
        if not self.path.is_file():
            raise ConfigSourceNotFoundError(
                f"Configuration file not found: {self.path}\n"
                f"Provide a valid path or set {self.env_var} environment variable.",
                path=self.path,
            )

        try:
            with open(self.path, encoding='utf-8') as f:
                text = f.read()
            data = self.parse(text)
        except (UnicodeDecodeError,) + self.PARSE_ERRORS as e:
            raise ConfigSourceMalformedError(
                f"Invalid {self.FORMAT_NAME} in configuration file: {self.path}\n{e}",
                path=self.path,
            ) from e

        logger.debug(f"Loaded {self.FORMAT_NAME} configuration from {self.path}", extra={
            'path': str(self.path),
            'format': self.FORMAT_NAME,
        })
        return data

    def get(self, key: str) -> Any:
        node = self._data
        for segment in key.split('.'):
            if isinstance(node, Mapping) and segment in node:
                node = node[segment]
            else:
                return MISSING
        return node

    def has(self, key: str) -> bool:
        return self.get(key) is not MISSING

    def get_all(self) -> Dict[str, Any]:
        """Return a shallow copy of the root document."""
        return copy.copy(self._data)


class JsonConfigProvider(DocumentConfigProvider):
    """Configuration provider backed by a JSON file."""

    FORMAT_NAME = 'JSON'
    PARSE_ERRORS = (json.JSONDecodeError,)

    def parse(self, text: str) -> Any:
        return json.loads(text)


class YamlConfigProvider(DocumentConfigProvider):
    """Configuration provider backed by a YAML file (safe loader only)."""

    FORMAT_NAME = 'YAML'
    PARSE_ERRORS = (yaml.YAMLError,)

    def parse(self, text: str) -> Any:
        data = yaml.safe_load(text)
        # Empty document
        return {} if data is None else data
