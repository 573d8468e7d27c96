"""Application services."""

from .account_import_service import AccountImportApplicationService

__all__ = ["AccountImportApplicationService"]
