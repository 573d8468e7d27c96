"""Configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.config.defaults import DEFAULT_CONFIG
from src.config.schemas import AppConfig, ArticleConfig, ImportConfig, LoggingConfig, StorageConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.core.exceptions import ConfigurationError
from src.infrastructure.logging.logger import get_logger

T = TypeVar("T", bound=BaseModel)

CONFIG_FILE_ENV_VAR = "PATTERN_KATA_CONFIG"

_SECTIONS: Dict[type, str] = {
    LoggingConfig: "LOGGING_CONFIG",
    StorageConfig: "STORAGE_CONFIG",
    ImportConfig: "IMPORT_CONFIG",
    ArticleConfig: "ARTICLE_CONFIG",
}


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration overrides from a JSON or YAML file
    - Environment variable interpolation
    - Configuration validation through pydantic schemas
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to configuration file. If not provided,
                        the PATTERN_KATA_CONFIG environment variable is used
                        when it is set.
        """
        self._logger = get_logger(__name__)
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)

        if self._config_file:
            self._merge_config(self._load_config_file(self._config_file))

        self._config = expand_config_env_vars(self._config)
        self._app_config = self._validate(self._config)

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith((".yml", ".yaml")):
                    user_config = yaml.safe_load(f) or {}
                else:
                    user_config = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a mapping"
            )
        self._logger.debug("Loaded configuration file", path=config_path)
        return user_config

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """
        Merge user configuration with defaults.

        Args:
            user_config: User configuration dictionary
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    @staticmethod
    def _validate(config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    @property
    def app_config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    def get_config(self) -> Dict[str, Any]:
        """Get a copy of the expanded configuration dictionary."""
        return copy.deepcopy(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_typed(self, config_class: Type[T]) -> T:
        """Get a configuration section as its typed schema."""
        section = _SECTIONS.get(config_class)
        if section is None:
            raise ConfigurationError(f"Unknown configuration type: {config_class.__name__}")
        try:
            return config_class.model_validate(self._config.get(section, {}))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid {section}: {e}", missing_fields=[section])
