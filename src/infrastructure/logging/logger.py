import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to every record."""

    def format(self, record):
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[Dict[str, Any]] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Configuration dictionary holding a LOGGING_CONFIG section.
               If None, the defaults from ConfigurationManager are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from src.config.manager import ConfigurationManager
        config = ConfigurationManager().get_config()

    logging_config = config["LOGGING_CONFIG"]
    log_format = logging_config.get(
        "format",
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, logging_config["level"].upper()))

    # Configure handlers
    handlers = []

    if logging_config["destination"] in ("file", "both"):
        log_file = os.path.expandvars(logging_config["file"]["path"])
        # Ensure the log directory exists
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config["file"]["max_size_mb"] * 1024 * 1024,
            backupCount=logging_config["file"]["backup_count"]
        )
        file_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(file_handler)

    if logging_config["destination"] in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(log_format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("pattern_kata")
    logger.debug(
        "Logging configured",
        log_level=logging_config["level"],
        log_destination=logging_config["destination"],
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger."""
    return structlog.get_logger(name)


def _configure_structlog() -> None:
    """Route structlog through stdlib logging so handlers decide where output goes."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


_configure_structlog()
