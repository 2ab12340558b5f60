"""
Tests for logging setup.
"""

import logging

import pytest

from cinepick.utils.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self):
        setup_logging(level="debug")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path):
        setup_logging(log_file="api.log", log_dir=str(tmp_path / "logs"))
        logging.getLogger("cinepick.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in (tmp_path / "logs" / "api.log").read_text()

    def test_quiet_loggers(self):
        setup_logging(level="DEBUG", quiet_loggers=("cinepick.noisy",))
        assert logging.getLogger("cinepick.noisy").level == logging.WARNING
