import json
import os
from unittest.mock import patch

import pytest
import yaml

from src.config import ConfigurationManager, ImportConfig, ImportServiceKind, LoggingConfig, StorageType
from src.config.manager import CONFIG_FILE_ENV_VAR
from src.domain.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment():
    with patch.dict(os.environ, {}, clear=True):
        yield


def test_defaults_are_expanded():
    manager = ConfigurationManager()

    assert manager.get("LOGGING_CONFIG.level") == "INFO"
    assert manager.get("STORAGE_CONFIG.type") == "memory"
    assert manager.get("STORAGE_CONFIG.json.path") == "./data/accounts.json"
    assert manager.get("ARTICLE_CONFIG.path") == "README.md"


def test_get_returns_default_for_missing_keys():
    manager = ConfigurationManager()

    assert manager.get("IMPORT_CONFIG.nope", "fallback") == "fallback"
    assert manager.get("LOGGING_CONFIG.level.deeper") is None


def test_environment_overrides_placeholders():
    with patch.dict(os.environ, {"PATTERN_KATA_LOG_LEVEL": "debug", "PATTERN_KATA_WORKDIR": "/work"}):
        manager = ConfigurationManager()

    assert manager.app_config.logging.level.value == "DEBUG"
    assert manager.get("IMPORT_CONFIG.audit_log.path") == "/work/data/import_audit.jsonl"


def test_json_file_is_merged_over_defaults(tmp_path):
    # Arrange
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"IMPORT_CONFIG": {"services": ["logging"]}}))

    # Act
    manager = ConfigurationManager(str(path))

    # Assert
    assert manager.get("IMPORT_CONFIG.services") == ["logging"]
    assert manager.get("IMPORT_CONFIG.audit_log.path") == "./data/import_audit.jsonl"


def test_yaml_file_from_environment(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"STORAGE_CONFIG": {"type": "json"}}))

    with patch.dict(os.environ, {CONFIG_FILE_ENV_VAR: str(path)}):
        manager = ConfigurationManager()

    assert manager.app_config.storage.type == StorageType.JSON


def test_get_typed_sections():
    manager = ConfigurationManager()

    imports = manager.get_typed(ImportConfig)
    logging_config = manager.get_typed(LoggingConfig)

    assert imports.services == [ImportServiceKind.REPOSITORY, ImportServiceKind.AUDIT_LOG]
    assert imports.audit_log_path == "./data/import_audit.jsonl"
    assert logging_config.file.max_size_mb == 10


def test_get_config_returns_a_copy():
    manager = ConfigurationManager()

    manager.get_config()["LOGGING_CONFIG"]["level"] = "ERROR"

    assert manager.get("LOGGING_CONFIG.level") == "INFO"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(tmp_path / "missing.json"))


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")

    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(path))


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"STORAGE_CONFIG": {"type": "dynamodb"}}))

    with pytest.raises(ConfigurationError):
        ConfigurationManager(str(path))
