"""Base configuration provider and the absent-value marker."""

from abc import ABC, abstractmethod
from typing import Any


class _Missing:
    """Marker for a key with no value in the backing store."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


class ConfigProvider(ABC):
    """
    Answers key-based lookups against one backing configuration store.

    Subclasses must implement get(). has() and get_all() are optional
    capabilities; Config discovers them at call time and falls back
    (or refuses) when they are absent.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under key, or MISSING."""
