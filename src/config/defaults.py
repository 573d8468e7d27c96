# src/config/defaults.py
from typing import Any, Dict
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class StorageType(str, Enum):
    """Account repository type enumeration."""
    MEMORY = "memory"
    JSON = "json"


class ImportServiceKind(str, Enum):
    """Import service kinds the factory knows how to build."""
    REPOSITORY = "repository"
    AUDIT_LOG = "audit_log"
    LOGGING = "logging"


DEFAULT_CONFIG: Dict[str, Any] = {
    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${PATTERN_KATA_LOG_LEVEL:INFO}",
        "destination": "${PATTERN_KATA_LOG_DESTINATION:stdout}",
        "file": {
            "path": "${PATTERN_KATA_LOGDIR:logs}/pattern-kata.log",
            "max_size_mb": 10,
            "backup_count": 5
        },
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"
    },

    # Account storage configuration
    "STORAGE_CONFIG": {
        "type": "${PATTERN_KATA_STORAGE:memory}",
        "json": {
            "path": "${PATTERN_KATA_WORKDIR:.}/data/accounts.json"
        }
    },

    # Import pipeline configuration
    "IMPORT_CONFIG": {
        "services": ["repository", "audit_log"],
        "audit_log": {
            "path": "${PATTERN_KATA_WORKDIR:.}/data/import_audit.jsonl"
        },
        # account_type -> service kind; when set, imports are routed to one service
        "routes": {},
        "default_route": None
    },

    # Article configuration
    "ARTICLE_CONFIG": {
        "path": "${PATTERN_KATA_ARTICLE:README.md}"
    }
}
