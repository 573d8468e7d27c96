"""Factory for the ImportService family."""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from src.config.defaults import ImportServiceKind
from src.config.schemas import ImportConfig
from src.domain.account.repository import AccountRepository
from src.domain.account.value_objects import AccountType
from src.domain.base.ports.import_service_port import ImportService
from src.domain.base.ports.time_service_port import TimeService
from src.domain.core.exceptions import ConfigurationError
from src.infrastructure.imports import (
    AuditLogImportService,
    ImportComposite,
    LoggingImportService,
    RepositoryImportService,
    RoutingImportComposite,
)
from src.infrastructure.logging.logger import get_logger


class ImportServiceFactory:
    """
    Creates import services.

    All construction of ImportService implementations goes through the named
    creation methods here, so call sites never repeat how a service is wired
    to its collaborators.
    """

    def __init__(self, time_service: TimeService, repository: AccountRepository):
        self._time_service = time_service
        self._repository = repository
        self._logger = get_logger(__name__)

    def create_repository_import_service(self) -> RepositoryImportService:
        return RepositoryImportService(self._repository, self._time_service)

    def create_audit_log_import_service(self, path: str) -> AuditLogImportService:
        return AuditLogImportService(path, self._time_service)

    def create_logging_import_service(self) -> LoggingImportService:
        return LoggingImportService()

    def create_composite_import_service(
        self, delegates: Iterable[ImportService]
    ) -> ImportComposite:
        return ImportComposite(delegates)

    def create_routing_import_service(
        self,
        routes: Mapping[AccountType, ImportService],
        default: Optional[ImportService] = None,
    ) -> RoutingImportComposite:
        return RoutingImportComposite(routes, default)

    def create_import_service(self, config: Dict[str, Any]) -> ImportService:
        """
        Create an import service from configuration.

        Args:
            config: Configuration dictionary holding an IMPORT_CONFIG section

        Returns:
            A single service, a composite of several, or a routing composite
            when routes are configured

        Raises:
            ConfigurationError: If the import configuration is invalid
        """
        try:
            import_config = ImportConfig.model_validate(config.get("IMPORT_CONFIG") or {})
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid IMPORT_CONFIG: {e}")

        if import_config.routes:
            return self._create_routing(import_config)

        services = self._create_many(import_config.services, import_config)
        if len(services) == 1:
            return services[0]
        self._logger.debug(
            "Creating composite import service",
            services=[kind.value for kind in import_config.services],
        )
        return self.create_composite_import_service(services)

    def _create_routing(self, import_config: ImportConfig) -> RoutingImportComposite:
        routes = {}
        for account_type, kind in import_config.routes.items():
            try:
                routes[AccountType(account_type)] = self._create_kind(kind, import_config)
            except ValueError:
                raise ConfigurationError(f"Unknown account type in routes: {account_type}")
        default = None
        if import_config.default_route is not None:
            default = self._create_kind(import_config.default_route, import_config)
        return self.create_routing_import_service(routes, default)

    def _create_many(
        self, kinds: List[ImportServiceKind], import_config: ImportConfig
    ) -> List[ImportService]:
        return [self._create_kind(kind, import_config) for kind in kinds]

    def _create_kind(self, kind: ImportServiceKind, import_config: ImportConfig) -> ImportService:
        if kind == ImportServiceKind.REPOSITORY:
            return self.create_repository_import_service()
        if kind == ImportServiceKind.AUDIT_LOG:
            if not import_config.audit_log_path:
                raise ConfigurationError(
                    "Missing audit log path", missing_fields=["IMPORT_CONFIG.audit_log.path"]
                )
            return self.create_audit_log_import_service(import_config.audit_log_path)
        if kind == ImportServiceKind.LOGGING:
            return self.create_logging_import_service()
        raise ConfigurationError(f"Unsupported import service kind: {kind}")
