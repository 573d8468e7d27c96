"""
Dependency object parent.

One object that knows how to build every production dependency of the
application. Each creation method has defaults that callers can override, and
built objects are memoised per parent so collaborators share them: the import
service factory and the application service see the same repository and the
same clock.
"""
from typing import Any, Callable, Dict, Optional, TypeVar

from src.application.services.account_import_service import AccountImportApplicationService
from src.config.manager import ConfigurationManager
from src.domain.account.repository import AccountRepository
from src.domain.base.ports.import_service_port import ImportService
from src.domain.base.ports.time_service_port import TimeService
from src.infrastructure.factories.import_service_factory import ImportServiceFactory
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.persistence.repository_factory import RepositoryFactory
from src.infrastructure.time.system_time_service import SystemTimeService

T = TypeVar("T")


class DependencyObjectParent:
    """Creates and shares the application's production dependencies."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the parent.

        Args:
            config: Configuration dictionary. Defaults to the configuration
                    loaded by ConfigurationManager.
        """
        self._config = config if config is not None else ConfigurationManager().get_config()
        self._instances: Dict[str, Any] = {}
        self._logger = get_logger(__name__)

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    def _memoised(self, key: str, factory: Callable[[], T]) -> T:
        if key not in self._instances:
            self._logger.debug("Creating dependency", dependency=key)
            self._instances[key] = factory()
        return self._instances[key]

    def create_time_service(self) -> TimeService:
        return self._memoised("time_service", SystemTimeService)

    def create_account_repository(
        self, kind: Optional[str] = None, path: Optional[str] = None
    ) -> AccountRepository:
        """Create the account repository; overrides bypass the shared instance."""
        if kind is not None or path is not None:
            return RepositoryFactory.create_repository(self._config, kind, path)
        return self._memoised(
            "account_repository",
            lambda: RepositoryFactory.create_repository(self._config),
        )

    def create_import_service_factory(
        self,
        time_service: Optional[TimeService] = None,
        repository: Optional[AccountRepository] = None,
    ) -> ImportServiceFactory:
        if time_service is not None or repository is not None:
            return ImportServiceFactory(
                time_service if time_service is not None else self.create_time_service(),
                repository if repository is not None else self.create_account_repository(),
            )
        return self._memoised(
            "import_service_factory",
            lambda: ImportServiceFactory(
                self.create_time_service(), self.create_account_repository()
            ),
        )

    def create_import_service(
        self,
        config: Optional[Dict[str, Any]] = None,
        factory: Optional[ImportServiceFactory] = None,
    ) -> ImportService:
        if config is not None or factory is not None:
            if factory is None:
                factory = self.create_import_service_factory()
            return factory.create_import_service(config if config is not None else self._config)
        return self._memoised(
            "import_service",
            lambda: self.create_import_service_factory().create_import_service(self._config),
        )

    def create_account_import_application_service(
        self,
        import_service: Optional[ImportService] = None,
        repository: Optional[AccountRepository] = None,
    ) -> AccountImportApplicationService:
        return AccountImportApplicationService(
            import_service if import_service is not None else self.create_import_service(),
            repository if repository is not None else self.create_account_repository(),
        )
