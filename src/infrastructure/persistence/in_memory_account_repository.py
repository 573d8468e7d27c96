# src/infrastructure/persistence/in_memory_account_repository.py
import threading
from typing import Dict, List, Optional

from src.domain.account.account_aggregate import Account
from src.domain.account.repository import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    """Account repository kept in process memory.

    Stored accounts are copies, so later mutation of the caller's object does
    not leak into the repository.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._accounts: Dict[str, Account] = {}

    def save(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.id] = account.model_copy(deep=True)

    def find_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            account = self._accounts.get(account_id)
            return account.model_copy(deep=True) if account else None

    def find_all(self) -> List[Account]:
        with self._lock:
            return [a.model_copy(deep=True) for a in self._accounts.values()]

    def __len__(self) -> int:
        return len(self._accounts)
