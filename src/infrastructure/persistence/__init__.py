"""Persistence package."""

from src.infrastructure.persistence.in_memory_account_repository import InMemoryAccountRepository
from src.infrastructure.persistence.json_account_repository import JSONAccountRepository

__all__ = [
    "InMemoryAccountRepository",
    "JSONAccountRepository",
]
