import logging
from logging.handlers import RotatingFileHandler

import pytest

from src.infrastructure.logging.logger import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _logging_config(tmp_path, destination, level="INFO"):
    return {
        "LOGGING_CONFIG": {
            "level": level,
            "destination": destination,
            "file": {
                "path": str(tmp_path / "logs" / "kata.log"),
                "max_size_mb": 1,
                "backup_count": 1,
            },
        }
    }


def test_file_destination_writes_log_file(tmp_path, restore_root_logger):
    # Arrange
    setup_logging(_logging_config(tmp_path, "file"))

    # Act
    get_logger("tests.logging").info("Account imported", account_id="acc-1")
    for handler in logging.getLogger().handlers:
        handler.flush()

    # Assert
    content = (tmp_path / "logs" / "kata.log").read_text()
    assert "Account imported" in content
    assert "account_id='acc-1'" in content


def test_both_destinations_install_two_handlers(tmp_path, restore_root_logger):
    setup_logging(_logging_config(tmp_path, "both", level="debug"))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)


def test_level_filters_messages(tmp_path, restore_root_logger):
    setup_logging(_logging_config(tmp_path, "file", level="WARNING"))

    get_logger("tests.logging").info("hidden message")
    get_logger("tests.logging").warning("visible message")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (tmp_path / "logs" / "kata.log").read_text()
    assert "hidden message" not in content
    assert "visible message" in content
