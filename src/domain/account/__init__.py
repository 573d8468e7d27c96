"""Account bounded context - users and the accounts they own."""

from .value_objects import AccountStatus, AccountType
from .user import User
from .account_aggregate import Account
from .repository import AccountRepository

__all__ = [
    "AccountStatus",
    "AccountType",
    "User",
    "Account",
    "AccountRepository",
]
