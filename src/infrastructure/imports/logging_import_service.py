"""Log imports through the structured logger."""
from src.domain.account.account_aggregate import Account
from src.domain.base.ports.import_service_port import ImportService
from src.infrastructure.logging.logger import get_logger


class LoggingImportService(ImportService):
    """Records each import in the application log."""

    def __init__(self):
        self._logger = get_logger(__name__)

    async def import_account(self, account: Account) -> None:
        self._logger.info(
            "Account imported",
            account_id=account.id,
            owner_id=account.owner.id,
            account_type=account.account_type.value,
        )
