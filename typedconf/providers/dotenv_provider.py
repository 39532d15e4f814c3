"""
Environment-File Provider

Loads a KEY=value file once with python-dotenv and serves coerced values.
"""

import io
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from typedconf.providers.base import ConfigProvider, MISSING
from typedconf.utils.coercion import coerce_value
from typedconf.utils.exceptions import ConfigSourceMalformedError, ConfigSourceNotFoundError
from typedconf.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def find_env_file(dotenv_path: PathLike = '.env', start: Optional[PathLike] = None) -> Path:
    """
    Locate an environment file.

    Absolute paths are returned as-is. Relative paths are searched for in
    start (default: cwd) and then in every ancestor up to and including the
    filesystem root. When nothing is found the path relative to start is
    returned so the caller gets a not-found error naming it.

    Args:
        dotenv_path: File name or path
        start: Directory to start searching from

    Returns:
        Path to load
    """
    candidate = Path(dotenv_path)
    if candidate.is_absolute():
        return candidate

    origin = Path(start) if start is not None else Path.cwd()
    current = origin.resolve()

    while True:
        env_path = current / candidate
        if env_path.is_file():
            return env_path
        if current.parent == current:
            break
        current = current.parent

    return origin / candidate


class DotEnvConfigProvider(ConfigProvider):
    """
    Configuration provider backed by a .env file.

    The file is located and parsed in the constructor; the loaded mapping
    is never mutated afterwards.
    """

    def __init__(self, dotenv_path: PathLike = '.env'):
        self.dotenv_path = dotenv_path
        self.path = find_env_file(dotenv_path)
        self._values: Dict[str, str] = self._load(self.path)

    @staticmethod
    def _load(path: Path) -> Dict[str, str]:
        if not path.is_file():
            raise ConfigSourceNotFoundError(
                f"Environment file not found: {path}", path=path
            )

        try:
            with open(path, encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise ConfigSourceMalformedError(
                f"Invalid content in environment file: {path}\n{e}",
                path=path,
            ) from e

        # python-dotenv only warns on bad lines; refuse the whole file instead
        for binding in parse_stream(io.StringIO(content)):
            if binding.error:
                raise ConfigSourceMalformedError(
                    f"Invalid content in environment file: {path}\n"
                    f"Line {binding.original.line}: {binding.original.string.rstrip()!r}",
                    path=path,
                )

        parsed = dotenv_values(stream=io.StringIO(content), interpolate=False)
        values = {k: v for k, v in parsed.items() if v is not None}

        logger.debug(f"Loaded environment file {path}", extra={
            'path': str(path),
            'keys': len(values),
        })
        return values

    def get(self, key: str) -> Any:
        if key not in self._values:
            return MISSING
        return coerce_value(self._values[key])

    def has(self, key: str) -> bool:
        return key in self._values
