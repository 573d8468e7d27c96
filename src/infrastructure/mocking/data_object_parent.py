"""
Data object parent.

Builds users and accounts with sensible defaults. Every field can be
overridden by keyword, so a test states only what it cares about:

    parent = DataObjectParent()
    account = parent.create_account(balance=Decimal("0"))
"""
import itertools
from decimal import Decimal
from typing import Any, List, Optional

from src.domain.account.account_aggregate import Account
from src.domain.account.user import User
from src.domain.account.value_objects import AccountStatus, AccountType
from src.domain.base.ports.time_service_port import TimeService
from src.infrastructure.mocking.fixed_time_service import FixedTimeService


class DataObjectParent:
    """Creates domain data objects with overridable defaults."""

    def __init__(self, time_service: Optional[TimeService] = None):
        self._time_service = time_service or FixedTimeService()
        self._user_ids = itertools.count(1)
        self._account_ids = itertools.count(1)

    def create_user(self, **overrides: Any) -> User:
        number = next(self._user_ids)
        fields = {
            "id": f"user-{number}",
            "name": f"Test User {number}",
            "email": f"user{number}@example.com",
            "created_at": self._time_service.now(),
        }
        fields.update(overrides)
        return User(**fields)

    def create_account(self, owner: Optional[User] = None, **overrides: Any) -> Account:
        number = next(self._account_ids)
        fields = {
            "id": f"acc-{number}",
            "owner": owner or self.create_user(),
            "account_type": AccountType.PERSONAL,
            "balance": Decimal("100.00"),
            "status": AccountStatus.ACTIVE,
            "created_at": self._time_service.now(),
        }
        fields.update(overrides)
        return Account(**fields)

    def create_accounts(self, count: int, **overrides: Any) -> List[Account]:
        return [self.create_account(**overrides) for _ in range(count)]
