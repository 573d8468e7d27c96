"""Main application configuration schema."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.config.defaults import ImportServiceKind, LogDestination, LogLevel, StorageType


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = "logs/pattern-kata.log"
    max_size_mb: int = Field(10, ge=1)
    backup_count: int = Field(5, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    destination: LogDestination = LogDestination.STDOUT
    file: LogFileConfig = Field(default_factory=LogFileConfig)
    format: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class StorageConfig(BaseModel):
    """Account storage configuration."""

    type: StorageType = StorageType.MEMORY
    json_path: str = Field("data/accounts.json", alias="json")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("json_path", mode="before")
    @classmethod
    def flatten_json_section(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("path", "data/accounts.json")
        return value


class ImportConfig(BaseModel):
    """Import pipeline configuration."""

    services: List[ImportServiceKind] = Field(
        default_factory=lambda: [ImportServiceKind.REPOSITORY]
    )
    audit_log_path: Optional[str] = Field(None, alias="audit_log")
    routes: Dict[str, ImportServiceKind] = Field(default_factory=dict)
    default_route: Optional[ImportServiceKind] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("audit_log_path", mode="before")
    @classmethod
    def flatten_audit_log_section(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("path")
        return value

    @model_validator(mode="after")
    def ensure_services(self) -> "ImportConfig":
        """Ensure at least one import service is configured."""
        if not self.services and not self.routes:
            raise ValueError("At least one import service must be configured")
        return self


class ArticleConfig(BaseModel):
    """Article location."""

    path: str = "README.md"


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig, alias="LOGGING_CONFIG")
    storage: StorageConfig = Field(default_factory=StorageConfig, alias="STORAGE_CONFIG")
    imports: ImportConfig = Field(default_factory=ImportConfig, alias="IMPORT_CONFIG")
    article: ArticleConfig = Field(default_factory=ArticleConfig, alias="ARTICLE_CONFIG")

    model_config = ConfigDict(populate_by_name=True)


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """Validate a raw configuration dictionary."""
    return AppConfig.model_validate(config)
