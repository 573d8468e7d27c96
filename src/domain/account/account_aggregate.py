"""Account aggregate."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from src.domain.base.entity import Entity
from src.domain.core.exceptions import InvalidAccountStateError
from .user import User
from .value_objects import AccountStatus, AccountType


class Account(Entity):
    """Account aggregate root."""

    id: str
    owner: User
    account_type: AccountType = AccountType.PERSONAL
    balance: Decimal = Decimal("0")
    status: AccountStatus = AccountStatus.ACTIVE
    imported_at: Optional[datetime] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("balance")
    @classmethod
    def validate_balance(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError(f"Account balance cannot be negative: {value}")
        return value

    def update_status(self, new_status: AccountStatus) -> None:
        """Move the account to a new status, enforcing valid transitions."""
        if self.status == new_status:
            return

        valid_transitions = {
            AccountStatus.ACTIVE: {AccountStatus.SUSPENDED, AccountStatus.CLOSED},
            AccountStatus.SUSPENDED: {AccountStatus.ACTIVE, AccountStatus.CLOSED},
            AccountStatus.CLOSED: set(),  # Terminal state
        }

        if new_status not in valid_transitions[self.status]:
            raise InvalidAccountStateError(
                self.id, self.status.value, f"move to {new_status.value}"
            )
        self.status = new_status

    def mark_imported(self, at: datetime) -> None:
        """Stamp the account as imported at the given instant."""
        if self.status.is_terminal:
            raise InvalidAccountStateError(self.id, self.status.value, "import")
        self.imported_at = at

    @property
    def is_imported(self) -> bool:
        return self.imported_at is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Account:
        return cls.model_validate(data)
