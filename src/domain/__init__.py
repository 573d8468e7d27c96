"""
Domain Layer

This domain layer is organized by bounded contexts:
- base/: Shared kernel with the entity base class and ports
- core/: Domain exceptions
- account/: Users and accounts

Ports in base/ports describe what the domain needs from the outside world
(the current time, importing an account). Infrastructure implements them.
"""

from .account import Account, AccountStatus, AccountType, User
from .base import Entity, ImportService, TimeService

__all__ = [
    "Account",
    "AccountStatus",
    "AccountType",
    "User",
    "Entity",
    "ImportService",
    "TimeService",
]
