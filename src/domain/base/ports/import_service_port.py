"""Import service port for bringing accounts into the system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.account.account_aggregate import Account


class ImportService(ABC):
    """Port for importing a single account.

    Implementations are interchangeable, which lets a composite stand in
    wherever a single import service is expected.
    """

    @property
    def name(self) -> str:
        """Human readable service name used in logs and errors."""
        return self.__class__.__name__

    @abstractmethod
    async def import_account(self, account: Account) -> None:
        """Import an account."""
