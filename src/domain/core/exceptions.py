# src/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidAccountStateError(DomainException):
    """Raised when an account is not in a state that allows the operation."""
    def __init__(self, account_id: str, status: str, operation: str):
        super().__init__(
            f"Cannot {operation} account {account_id} in status {status}"
        )
        self.account_id = account_id
        self.status = status
        self.operation = operation


class ImportFailedError(DomainException):
    """Raised when an import service cannot import an account."""
    def __init__(self, service: str, account_id: str, message: str):
        super().__init__(f"{service} failed to import account {account_id}: {message}")
        self.service = service
        self.account_id = account_id


class NoImportRouteError(DomainException):
    """Raised when no import service is routed for an account type."""
    def __init__(self, account_type: str):
        super().__init__(f"No import service routed for account type {account_type}")
        self.account_type = account_type


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ArticleStructureError(ValidationError):
    """Raised when the article does not have the expected structure."""
    def __init__(self, violations: List[str]):
        super().__init__(
            f"Article structure check failed with {len(violations)} violation(s)",
            violations
        )
        self.violations = violations
