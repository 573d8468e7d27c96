"""Composite import services.

A composite implements ImportService itself, so callers can not tell whether
they talk to one service or to many.
"""
from typing import Dict, Iterable, Mapping, Optional, Tuple

from src.domain.account.account_aggregate import Account
from src.domain.account.value_objects import AccountType
from src.domain.base.ports.import_service_port import ImportService
from src.domain.core.exceptions import NoImportRouteError
from src.infrastructure.logging.logger import get_logger


class ImportComposite(ImportService):
    """Fans every import out to all delegates, in order.

    Delegates are awaited one after the other. The first failure propagates
    and the remaining delegates are not called.
    """

    def __init__(self, delegates: Iterable[ImportService] = ()):
        self._delegates = list(delegates)
        self._logger = get_logger(__name__)

    @property
    def delegates(self) -> Tuple[ImportService, ...]:
        return tuple(self._delegates)

    def add(self, delegate: ImportService) -> "ImportComposite":
        self._delegates.append(delegate)
        return self

    async def import_account(self, account: Account) -> None:
        for delegate in self._delegates:
            self._logger.debug("Delegating import", service=delegate.name, account_id=account.id)
            await delegate.import_account(account)

    def __len__(self) -> int:
        return len(self._delegates)


class RoutingImportComposite(ImportService):
    """Dispatches each import to exactly one delegate, chosen by account type."""

    def __init__(
        self,
        routes: Mapping[AccountType, ImportService],
        default: Optional[ImportService] = None,
    ):
        self._routes: Dict[AccountType, ImportService] = dict(routes)
        self._default = default
        self._logger = get_logger(__name__)

    @property
    def routes(self) -> Dict[AccountType, ImportService]:
        return dict(self._routes)

    @property
    def default(self) -> Optional[ImportService]:
        return self._default

    def route_for(self, account_type: AccountType) -> ImportService:
        delegate = self._routes.get(account_type, self._default)
        if delegate is None:
            raise NoImportRouteError(account_type.value)
        return delegate

    async def import_account(self, account: Account) -> None:
        delegate = self.route_for(account.account_type)
        self._logger.debug("Routing import", service=delegate.name, account_id=account.id)
        await delegate.import_account(account)
