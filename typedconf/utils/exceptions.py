"""
Custom Exception Types

Specific exceptions for configuration lookup and source loading.
"""


class ConfigError(Exception):
    """Base exception for typedconf."""
    pass


class ConfigPropertyDoesNotExistError(ConfigError, KeyError):
    """A required configuration property has no value and no default."""

    def __init__(self, property_name: str):
        super().__init__(property_name)
        self.property_name = property_name

    def __str__(self) -> str:
        return f'Configuration property "{self.property_name}" does not exist or is not defined'


class ConfigSourceNotFoundError(ConfigError, FileNotFoundError):
    """Configuration source file does not exist."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class ConfigSourceMalformedError(ConfigError, ValueError):
    """Configuration source exists but its content cannot be parsed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class UnsupportedOperationError(ConfigError, NotImplementedError):
    """Bound provider lacks the requested capability."""
    pass
