# src/infrastructure/persistence/json_account_repository.py
import json
import os
import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from src.domain.account.account_aggregate import Account
from src.domain.account.repository import AccountRepository
from src.infrastructure.exceptions import StorageError
from src.infrastructure.logging.logger import get_logger


class JSONAccountRepository(AccountRepository):
    """
    JSON file implementation of the account repository.

    Storage structure:
    {
        "accounts": {
            "acc-1": { account_data },
            "acc-2": { account_data }
        }
    }
    """

    COLLECTION = "accounts"

    def __init__(self, storage_path: str):
        """
        Initialize JSON repository.

        Args:
            storage_path: Path to JSON storage file
        """
        self._storage_path = storage_path
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    @property
    def storage_path(self) -> str:
        return self._storage_path

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self._storage_path):
            return {}
        try:
            with open(self._storage_path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise StorageError(f"Failed to read {self._storage_path}: {e}")
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupted account storage {self._storage_path}: {e}")
        accounts = data.get(self.COLLECTION, {}) if isinstance(data, dict) else None
        if not isinstance(accounts, dict):
            raise StorageError(f"Unexpected layout in account storage {self._storage_path}")
        return accounts

    def _write(self, accounts: Dict[str, Any]) -> None:
        directory = os.path.dirname(self._storage_path)
        tmp_path = f"{self._storage_path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump({self.COLLECTION: accounts}, f, indent=2)
            # Atomic replace so readers never see a partial file
            os.replace(tmp_path, self._storage_path)
        except OSError as e:
            raise StorageError(f"Failed to write {self._storage_path}: {e}")

    def _to_entity(self, data: Dict[str, Any]) -> Account:
        try:
            return Account.from_dict(data)
        except PydanticValidationError as e:
            raise StorageError(f"Invalid account record in {self._storage_path}", details=str(e))

    def save(self, account: Account) -> None:
        with self._lock:
            accounts = self._read()
            accounts[account.id] = account.to_dict()
            self._write(accounts)
        self._logger.debug("Saved account", account_id=account.id, path=self._storage_path)

    def find_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            data = self._read().get(account_id)
        return self._to_entity(data) if data is not None else None

    def find_all(self) -> List[Account]:
        with self._lock:
            records = list(self._read().values())
        return [self._to_entity(r) for r in records]
