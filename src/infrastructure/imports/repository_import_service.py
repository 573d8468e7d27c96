"""Import accounts into an account repository."""
from src.domain.account.account_aggregate import Account
from src.domain.account.repository import AccountRepository
from src.domain.base.ports.import_service_port import ImportService
from src.domain.base.ports.time_service_port import TimeService
from src.infrastructure.exceptions import StorageError
from src.domain.core.exceptions import ImportFailedError
from src.infrastructure.logging.logger import get_logger


class RepositoryImportService(ImportService):
    """Stamps the account as imported and stores it."""

    def __init__(self, repository: AccountRepository, time_service: TimeService):
        self._repository = repository
        self._time_service = time_service
        self._logger = get_logger(__name__)

    @property
    def repository(self) -> AccountRepository:
        return self._repository

    async def import_account(self, account: Account) -> None:
        account.mark_imported(self._time_service.now())
        try:
            self._repository.save(account)
        except StorageError as e:
            raise ImportFailedError(self.name, account.id, str(e)) from e
        self._logger.debug("Account stored", account_id=account.id)
