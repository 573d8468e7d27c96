"""Account repository interface - contract for account data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .account_aggregate import Account
from .value_objects import AccountType


class AccountRepository(ABC):
    """Repository interface for account aggregates."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Save or replace an account."""

    @abstractmethod
    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Find account by ID."""

    @abstractmethod
    def find_all(self) -> List[Account]:
        """Find all accounts."""

    def find_by_type(self, account_type: AccountType) -> List[Account]:
        """Find accounts of the given type."""
        return [a for a in self.find_all() if a.account_type == account_type]

    def exists(self, account_id: str) -> bool:
        """Check if an account exists."""
        return self.find_by_id(account_id) is not None
