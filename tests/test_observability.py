"""
Tests for observability — logging setup and level resolution.
"""

import logging
from pathlib import Path

import pytest

from gitignorer.core.observability.logging_config import (
    ENV_LOG_LEVEL,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_debug_wins(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"

    def test_verbose(self):
        assert resolve_level(verbose=True, quiet=True) == "INFO"

    def test_quiet(self):
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "INFO")
        assert resolve_level() == "INFO"

    def test_default(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        assert resolve_level() == "WARNING"


class TestParseLevel:
    def test_known_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_invalid_falls_back(self):
        assert _parse_level("LOUD") == logging.WARNING
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_handler(self, restore_root_logger):
        setup_logging(level="INFO")
        root = restore_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_file_handler(self, restore_root_logger, tmp_path: Path):
        log_file = tmp_path / "gitignorer.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("gitignorer.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text()

    def test_repeated_setup_does_not_stack_handlers(self, restore_root_logger):
        setup_logging(level="INFO")
        setup_logging(level="DEBUG")
        assert len(restore_root_logger.handlers) == 1
