"""Account-specific value objects."""
from enum import Enum


class AccountType(str, Enum):
    """Kind of account, used to route imports."""
    PERSONAL = "personal"
    BUSINESS = "business"
    TRIAL = "trial"


class AccountStatus(str, Enum):
    """Account lifecycle status."""
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CLOSED = "closed"

    @property
    def is_terminal(self) -> bool:
        return self == AccountStatus.CLOSED
