"""Configuration schemas."""

from .app_schema import (
    AppConfig,
    ArticleConfig,
    ImportConfig,
    LoggingConfig,
    StorageConfig,
    validate_config,
)

__all__ = [
    "AppConfig",
    "ArticleConfig",
    "ImportConfig",
    "LoggingConfig",
    "StorageConfig",
    "validate_config",
]
