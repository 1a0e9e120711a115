########### EXTERNAL IMPORTS ############

import os
import logging
import pytest

#########################################

############# LOCAL IMPORTS #############

from util.debug import LoggerManager
import util.functions.objects as objects

#########################################


@pytest.fixture(autouse=True)
def reset_logger_manager(monkeypatch):

    for key in ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    original_level = logging.getLogger().level
    LoggerManager.reset()
    yield
    LoggerManager.reset()
    for key in ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE"):
        os.environ.pop(key, None)
    logging.getLogger().setLevel(original_level)


def test_logger_manager_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LoggerManager()


def test_init_uses_default_level():
    LoggerManager.init()
    assert logging.getLogger().level == logging.INFO


def test_init_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    LoggerManager.init()
    assert logging.getLogger().level == logging.DEBUG


def test_init_reads_config_file(tmp_path, monkeypatch):
    log_file = tmp_path / "window.log"
    config_file = tmp_path / "logging.env"
    config_file.write_text(f"LOG_LEVEL=WARNING\nLOG_TO_FILE=TRUE\nLOG_FILE={log_file}\n")

    LoggerManager.init(config_file=str(config_file))
    LoggerManager.get_logger("windowed.test").warning("written to file")
    LoggerManager.reset()

    assert logging.getLogger().level == logging.WARNING
    assert "written to file" in log_file.read_text()


def test_init_is_applied_once():
    LoggerManager.init()
    handlers = len(logging.getLogger().handlers)
    LoggerManager.init()
    assert len(logging.getLogger().handlers) == handlers


def test_invalid_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        LoggerManager.init()


def test_log_file_required_when_enabled(monkeypatch):
    monkeypatch.setenv("LOG_TO_FILE", "true")
    with pytest.raises(KeyError):
        LoggerManager.init()


def test_check_bool_str():
    assert objects.check_bool_str("TRUE") is True
    assert objects.check_bool_str(" true ") is True
    assert objects.check_bool_str("yes") is False
    assert objects.check_bool_str(None) is False
