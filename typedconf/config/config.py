"""
Config Facade

Wraps one provider and reconciles caller-declared schemas against it.
"""

from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel

from typedconf.providers.base import MISSING
from typedconf.utils.exceptions import ConfigPropertyDoesNotExistError, UnsupportedOperationError
from typedconf.utils.logger import get_logger

logger = get_logger(__name__)

M = TypeVar('M', bound=BaseModel)


class _Required:
    """Schema marker: the setting has no default and must be provided."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'REQUIRED'

    def __reduce__(self):
        return (_Required, ())


REQUIRED = _Required()


class Config:
    """
    Typed access to a configuration provider.

    Example:
        config = create_dotenv_config()
        values = config.read({
            'PORT': 3000,
            'OPENAI_API_KEY': REQUIRED,
            'NODE_ENV': 'development',
        })
        # {'PORT': 8080, 'OPENAI_API_KEY': 'sk-...', 'NODE_ENV': 'development'}
    """

    def __init__(self, provider):
        self._provider = provider

    @property
    def provider(self):
        return self._provider

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return the value for key, or default when the provider has none.

        Without an explicit default, a stored null and a missing key both
        return None. Pass default=MISSING, or call has(), to tell them apart.
        """
        value = self._provider.get(key)
        if value is MISSING:
            return default
        return value

    def has(self, key: str) -> bool:
        has = getattr(self._provider, 'has', None)
        if callable(has):
            return has(key)
        return self._provider.get(key) is not MISSING

    def get_all(self) -> Dict[str, Any]:
        """
        Get the entire configuration document.

        Raises:
            UnsupportedOperationError: If the provider cannot enumerate its values
        """
        get_all = getattr(self._provider, 'get_all', None)
        if not callable(get_all):
            raise UnsupportedOperationError(
                f"Provider {type(self._provider).__name__} does not support get_all"
            )
        return get_all()

    def read(self, schema: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Read several settings at once, applying defaults.

        Provider values always win. A missing setting falls back to its
        declared default; REQUIRED settings without a value abort the whole
        call. Keys are processed in the schema's iteration order, so the
        first missing required key is the one reported.

        Args:
            schema: Setting name -> default value or REQUIRED

        Returns:
            Dict with exactly the schema's keys

        Raises:
            ConfigPropertyDoesNotExistError: If a required setting is missing
        """
        result = {}

        for name, default in schema.items():
            value = self._provider.get(name)

            if value is not MISSING:
                result[name] = value
            elif default is not REQUIRED:
                logger.debug(f"Using default for {name}", extra={'setting': name})
                result[name] = default
            else:
                raise ConfigPropertyDoesNotExistError(name)

        return result

    def read_model(self, model: Type[M]) -> M:
        """
        Read the fields of a pydantic model and validate them.

        Field aliases are used as lookup keys when declared. Required fields
        become REQUIRED entries; the others use their default.

        Raises:
            ConfigPropertyDoesNotExistError: If a required field is missing
            ValidationError: If a value does not match the field type
        """
        schema = {}
        for field_name, field in model.model_fields.items():
            key = field.alias or field_name
            if field.is_required():
                schema[key] = REQUIRED
            elif field.default_factory is not None:
                schema[key] = field.default_factory()
            else:
                schema[key] = field.default

        return model.model_validate(self.read(schema))
