"""Append an audit trail line for every imported account."""
import json
import os

from src.domain.account.account_aggregate import Account
from src.domain.base.ports.import_service_port import ImportService
from src.domain.base.ports.time_service_port import TimeService
from src.domain.core.exceptions import ImportFailedError


class AuditLogImportService(ImportService):
    """
    Writes one JSON line per import to an audit log file.

    Each line holds account_id, owner_id, account_type and imported_at.
    Parent directories are created on first write.
    """

    def __init__(self, path: str, time_service: TimeService):
        self._path = path
        self._time_service = time_service

    @property
    def path(self) -> str:
        return self._path

    async def import_account(self, account: Account) -> None:
        entry = {
            "account_id": account.id,
            "owner_id": account.owner.id,
            "account_type": account.account_type.value,
            "imported_at": self._time_service.now().isoformat(),
        }
        try:
            directory = os.path.dirname(self._path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            raise ImportFailedError(self.name, account.id, str(e)) from e
