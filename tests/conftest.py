import copy
from datetime import datetime, timezone

import pytest

from src.config.defaults import DEFAULT_CONFIG
from src.config.utils.env_expansion import expand_config_env_vars
from src.infrastructure.mocking import DataObjectParent, FixedTimeService
from src.infrastructure.persistence import InMemoryAccountRepository
from src.domain.base.ports.import_service_port import ImportService


class RecordingImportService(ImportService):
    """Import service that remembers what it was asked to import."""

    def __init__(self, label="recorder", calls=None, error=None):
        self.label = label
        self.imported = []
        self.calls = calls if calls is not None else []
        self.error = error

    @property
    def name(self):
        return self.label

    async def import_account(self, account):
        self.calls.append(self.label)
        if self.error is not None:
            raise self.error
        self.imported.append(account.id)


@pytest.fixture
def instant():
    return datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def time_service(instant):
    return FixedTimeService(instant)


@pytest.fixture
def data_parent(time_service):
    return DataObjectParent(time_service)


@pytest.fixture
def repository():
    return InMemoryAccountRepository()


@pytest.fixture
def app_config(tmp_path):
    """Expanded default configuration writing into a temporary directory."""
    config = expand_config_env_vars(copy.deepcopy(DEFAULT_CONFIG))
    config["STORAGE_CONFIG"]["type"] = "memory"
    config["STORAGE_CONFIG"]["json"]["path"] = str(tmp_path / "data" / "accounts.json")
    config["IMPORT_CONFIG"]["audit_log"]["path"] = str(tmp_path / "data" / "audit.jsonl")
    config["LOGGING_CONFIG"]["level"] = "WARNING"
    config["LOGGING_CONFIG"]["destination"] = "stdout"
    return config


@pytest.fixture
def make_recorder():
    """Factory for recording import services sharing an optional call log."""
    def _make(label="recorder", calls=None, error=None):
        return RecordingImportService(label, calls, error)
    return _make
