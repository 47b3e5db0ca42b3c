"""Configuration manager - loads, expands and validates configuration."""

import json
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from solid_principles.config.schemas import AppConfig, validate_config
from solid_principles.config.utils import expand_config_env_vars
from solid_principles.domain.exceptions import ConfigurationError

CONFIG_ENV_VAR = "SOLID_PRINCIPLES_CONFIG"


class ConfigurationManager:
    """
    Loads an optional JSON configuration file into ``AppConfig``.

    When no path is given the ``SOLID_PRINCIPLES_CONFIG`` environment variable
    is consulted; without either, defaults apply.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or os.environ.get(CONFIG_ENV_VAR) or None
        self._raw: Optional[Dict[str, Any]] = None
        self._config: Optional[AppConfig] = None

    def _load_raw(self) -> Dict[str, Any]:
        if self._raw is not None:
            return self._raw

        if self.config_path is None:
            self._raw = {}
            return self._raw

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {self.config_path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be an object: {self.config_path}")

        self._raw = expand_config_env_vars(data)
        return self._raw

    def get_config(self) -> AppConfig:
        """Return the validated application configuration."""
        if self._config is None:
            raw = self._load_raw()
            try:
                self._config = validate_config(raw)
            except PydanticValidationError as e:
                missing = [
                    ".".join(str(part) for part in error["loc"])
                    for error in e.errors()
                    if error["type"] == "missing"
                ]
                raise ConfigurationError(f"Invalid configuration: {e}", missing) from e
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the validated configuration by dotted key."""
        current: Any = self.get_config().model_dump()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given path."""
    return ConfigurationManager(config_path)
