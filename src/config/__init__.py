"""Configuration package with clean public API."""

from .defaults import DEFAULT_CONFIG, ImportServiceKind, LogDestination, LogLevel, StorageType
from .schemas import (
    AppConfig,
    ArticleConfig,
    ImportConfig,
    LoggingConfig,
    StorageConfig,
    validate_config,
)
from .manager import ConfigurationManager

__all__ = [
    "DEFAULT_CONFIG",
    "ImportServiceKind",
    "LogDestination",
    "LogLevel",
    "StorageType",
    "AppConfig",
    "ArticleConfig",
    "ImportConfig",
    "LoggingConfig",
    "StorageConfig",
    "validate_config",
    "ConfigurationManager",
]
