from decimal import Decimal

from src.application.services import AccountImportApplicationService
from src.domain.account import AccountStatus, AccountType
from src.infrastructure.di import DependencyObjectParent
from src.infrastructure.factories import ImportServiceFactory
from src.infrastructure.imports import ImportComposite, LoggingImportService
from src.infrastructure.mocking import DataObjectParent, FixedTimeService
from src.infrastructure.persistence import InMemoryAccountRepository, JSONAccountRepository
from src.infrastructure.time import SystemTimeService


class TestDataObjectParent:
    """Fixture creation with overridable defaults."""

    def test_create_user_defaults(self, data_parent, instant):
        user = data_parent.create_user()

        assert user.id == "user-1"
        assert user.name == "Test User 1"
        assert user.email == "user1@example.com"
        assert user.created_at == instant

    def test_create_user_overrides(self, data_parent):
        user = data_parent.create_user(name="Grace Hopper", email="grace@example.com")

        assert user.name == "Grace Hopper"
        assert user.email == "grace@example.com"

    def test_create_account_defaults(self, data_parent):
        account = data_parent.create_account()

        assert account.id == "acc-1"
        assert account.owner.id == "user-1"
        assert account.account_type == AccountType.PERSONAL
        assert account.status == AccountStatus.ACTIVE
        assert account.balance == Decimal("100.00")

    def test_create_account_overrides(self, data_parent):
        owner = data_parent.create_user(id="owner")

        account = data_parent.create_account(
            owner=owner, balance=Decimal("0"), status=AccountStatus.SUSPENDED
        )

        assert account.owner == owner
        assert account.balance == Decimal("0")
        assert account.status == AccountStatus.SUSPENDED

    def test_ids_are_unique_per_parent(self, data_parent):
        accounts = data_parent.create_accounts(3)

        assert [a.id for a in accounts] == ["acc-1", "acc-2", "acc-3"]
        assert len({a.owner.id for a in accounts}) == 3

    def test_create_accounts_applies_overrides(self, data_parent):
        accounts = data_parent.create_accounts(2, account_type=AccountType.TRIAL)

        assert {a.account_type for a in accounts} == {AccountType.TRIAL}

    def test_default_time_service(self):
        parent = DataObjectParent()

        assert parent.create_user().created_at == FixedTimeService().now()


class TestDependencyObjectParent:
    """Production dependency creation."""

    def test_default_dependencies(self, app_config):
        parent = DependencyObjectParent(app_config)

        assert isinstance(parent.create_time_service(), SystemTimeService)
        assert isinstance(parent.create_account_repository(), InMemoryAccountRepository)
        assert isinstance(parent.create_import_service_factory(), ImportServiceFactory)
        assert isinstance(parent.create_import_service(), ImportComposite)
        assert isinstance(
            parent.create_account_import_application_service(), AccountImportApplicationService
        )

    def test_dependencies_are_shared(self, app_config):
        parent = DependencyObjectParent(app_config)

        assert parent.create_time_service() is parent.create_time_service()
        assert parent.create_account_repository() is parent.create_account_repository()
        assert parent.create_import_service() is parent.create_import_service()

    def test_repository_override(self, app_config, tmp_path):
        parent = DependencyObjectParent(app_config)
        path = str(tmp_path / "other.json")

        repository = parent.create_account_repository(kind="json", path=path)

        assert isinstance(repository, JSONAccountRepository)
        assert repository is not parent.create_account_repository()

    def test_import_service_factory_override(self, app_config, time_service, repository):
        parent = DependencyObjectParent(app_config)

        factory = parent.create_import_service_factory(time_service=time_service, repository=repository)
        service = factory.create_repository_import_service()

        assert service.repository is repository
        assert factory is not parent.create_import_service_factory()

    def test_import_service_config_override(self, app_config):
        parent = DependencyObjectParent(app_config)

        service = parent.create_import_service(config={"IMPORT_CONFIG": {"services": ["logging"]}})

        assert isinstance(service, LoggingImportService)

    def test_application_service_override(self, app_config, make_recorder):
        parent = DependencyObjectParent(app_config)
        recorder = make_recorder()

        service = parent.create_account_import_application_service(import_service=recorder)

        assert service.import_service is recorder

    def test_empty_overrides_are_not_replaced(self, app_config):
        parent = DependencyObjectParent(app_config)
        composite = ImportComposite()
        repository = InMemoryAccountRepository()

        service = parent.create_account_import_application_service(
            import_service=composite, repository=repository
        )

        assert service.import_service is composite
        assert service.repository is repository
        assert service.repository is not parent.create_account_repository()

    def test_empty_repository_reaches_factory(self, app_config):
        parent = DependencyObjectParent(app_config)
        repository = InMemoryAccountRepository()

        factory = parent.create_import_service_factory(repository=repository)

        assert factory.create_repository_import_service().repository is repository
