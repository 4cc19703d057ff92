"""
Configuration management for the demo runner.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from copy import deepcopy
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError
from validation.schema import Schema

logger = get_logger(__name__)


class Config:
    """Nested configuration container addressed by dotted keys."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with default, accepting dotted keys."""
        try:
            value = self._data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value using dot notation."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if not isinstance(data.get(k), dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = deepcopy(value)


class ConfigManager:
    """
    Configuration assembled from dictionaries, files and the environment.

    Later sources override earlier ones key by key.
    """

    ENV_PREFIX = "PATTERNS_"
    ENV_NESTING = "__"

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._config = Config(deepcopy(defaults) if defaults else {})
        self._schemas: Dict[str, Schema] = {}
        self.logger = get_logger(self.__class__.__name__)

    def load_from_file(self, filepath: str):
        """Load configuration from a JSON or YAML file."""
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            )

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {filepath} must be a mapping, got {type(data).__name__}",
                details={'filepath': str(path)}
            )

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """
        Load configuration from environment variables.

        ``PATTERNS_OBSERVER__MESSAGE=hi`` sets ``observer.message``. A value
        replacing a string setting is kept verbatim; any other value is parsed
        as JSON when possible, otherwise kept as a string.
        """
        prefix = prefix or self.ENV_PREFIX
        environ = os.environ if environ is None else environ
        loaded = 0

        for key, value in environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower().replace(self.ENV_NESTING, '.')

            if isinstance(self._config.get(config_key), str):
                parsed_value = value
            else:
                try:
                    parsed_value = json.loads(value)
                except json.JSONDecodeError:
                    parsed_value = value

            self._config.set(config_key, parsed_value)
            loaded += 1

        self.logger.info(f"Loaded {loaded} configuration values from environment")

    def load_from_dict(self, data: Dict[str, Any]):
        """Load configuration from dictionary."""
        self._config.update(data)
        self.logger.debug("Loaded configuration from dictionary")

    def register_schema(self, name: str, schema: Schema):
        """Register a validation schema."""
        self._schemas[name] = schema
        self.logger.debug(f"Registered schema: {name}")

    def validated(self, schema_name: str) -> Dict[str, Any]:
        """Return the whole configuration validated against a registered schema."""
        if schema_name not in self._schemas:
            raise ConfigurationError(
                f"Unknown schema: {schema_name}",
                details={'available_schemas': list(self._schemas)}
            )
        return self._schemas[schema_name].validate(self._config.to_dict())

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)
