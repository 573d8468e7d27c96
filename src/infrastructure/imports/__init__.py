"""Import service implementations."""

from .audit_log_import_service import AuditLogImportService
from .composite import ImportComposite, RoutingImportComposite
from .logging_import_service import LoggingImportService
from .repository_import_service import RepositoryImportService

__all__ = [
    "AuditLogImportService",
    "ImportComposite",
    "LoggingImportService",
    "RepositoryImportService",
    "RoutingImportComposite",
]
