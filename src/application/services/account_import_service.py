"""Account import use case."""
import asyncio
import json
from typing import Any, Iterable, List

import yaml
from pydantic import ValidationError as PydanticValidationError

from src.application.dto.responses import ImportSummary
from src.domain.account.account_aggregate import Account
from src.domain.account.repository import AccountRepository
from src.domain.account.value_objects import AccountStatus
from src.domain.base.ports.import_service_port import ImportService
from src.domain.core.exceptions import ValidationError
from src.infrastructure.logging.logger import get_logger


class AccountImportApplicationService:
    """
    Imports accounts read from a file through an ImportService.

    The import service may be a single implementation or a composite; this
    service does not know and does not care.
    """

    def __init__(self, import_service: ImportService, repository: AccountRepository):
        self._import_service = import_service
        self._repository = repository
        self._logger = get_logger(__name__)

    @property
    def import_service(self) -> ImportService:
        return self._import_service

    @property
    def repository(self) -> AccountRepository:
        return self._repository

    def load_accounts(self, path: str) -> List[Account]:
        """
        Load account documents from a JSON or YAML file.

        The file holds either a list of account documents or a mapping with an
        "accounts" list.

        Raises:
            ValidationError: If the file can not be read or a document is invalid
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yml", ".yaml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ValidationError(f"Failed to read accounts from {path}: {e}")

        if isinstance(data, dict):
            data = data.get("accounts")
        if not isinstance(data, list):
            raise ValidationError(f"{path} must contain a list of accounts")

        return [self._parse_account(index, document) for index, document in enumerate(data)]

    @staticmethod
    def _parse_account(index: int, document: Any) -> Account:
        try:
            return Account.model_validate(document)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid account at index {index}", details=e.errors())

    async def import_accounts(self, accounts: Iterable[Account]) -> ImportSummary:
        """Import every account that is not closed."""
        imported: List[str] = []
        skipped: List[str] = []
        for account in accounts:
            if account.status == AccountStatus.CLOSED:
                self._logger.info("Skipping closed account", account_id=account.id)
                skipped.append(account.id)
                continue
            await self._import_service.import_account(account)
            imported.append(account.id)

        self._logger.info(
            "Import finished", imported=len(imported), skipped=len(skipped)
        )
        return ImportSummary(imported=imported, skipped=skipped)

    def import_file(self, path: str) -> ImportSummary:
        """Load accounts from a file and import them."""
        return asyncio.run(self.import_accounts(self.load_accounts(path)))

    def list_accounts(self) -> List[Account]:
        return self._repository.find_all()
