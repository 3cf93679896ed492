"""
Unit tests for logging setup and formatters.
"""

import json
import logging
import sys

import pytest

from account_tree.core import config
from account_tree.core import logging as logging_config
from account_tree.core.config import Settings


@pytest.fixture
def package_logger(monkeypatch):
    """Give each test an unconfigured ``account_tree`` logger and restore it afterwards."""
    logger = logging.getLogger("account_tree")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_config, "_LOGGING_CONFIGURED", False)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def _record(msg="hello", **extra):
    record = logging.LogRecord("account_tree.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSetupLogging:
    def test_configures_package_logger(self, package_logger, monkeypatch):
        monkeypatch.setattr(config, "settings", Settings(ACCOUNT_TREE_LOG_LEVEL="warning"))

        logging_config.setup_logging()

        assert package_logger.level == logging.WARNING
        assert package_logger.propagate is False
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, logging_config.ColoredFormatter)

    def test_json_format(self, package_logger, monkeypatch):
        monkeypatch.setattr(config, "settings", Settings(ACCOUNT_TREE_LOG_FORMAT="json"))

        logging_config.setup_logging()

        assert isinstance(package_logger.handlers[0].formatter, logging_config.JSONFormatter)

    def test_second_call_is_a_no_op(self, package_logger, monkeypatch):
        monkeypatch.setattr(config, "settings", Settings())
        logging_config.setup_logging()
        handler = package_logger.handlers[0]

        logging_config.setup_logging()

        assert package_logger.handlers == [handler]


class TestFormatters:
    def test_colored_formatter_appends_extras(self):
        formatter = logging_config.ColoredFormatter(use_colors=False)

        line = formatter.format(_record(subscription_count=3))

        assert "INFO - account_tree.test - hello" in line
        assert line.endswith("| subscription_count=3")

    def test_json_formatter_includes_extras_and_exception(self):
        formatter = logging_config.JSONFormatter()
        try:
            raise ValueError("bad status")
        except ValueError:
            record = _record(status="LoggedIn")
            record.exc_info = sys.exc_info()

        data = json.loads(formatter.format(record))

        assert data["message"] == "hello"
        assert data["logger"] == "account_tree.test"
        assert data["status"] == "LoggedIn"
        assert data["exception"]["type"] == "ValueError"


def test_get_logger_is_namespaced():
    assert logging_config.get_logger("hosts.vscode").name == "account_tree.hosts.vscode"
