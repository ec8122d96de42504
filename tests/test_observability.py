"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

import pytest

from pkgci.core.observability.logging_config import (
    LEVEL_ENV,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture
def pkgci_logger():
    logger = logging.getLogger("pkgci")
    handlers, level = logger.handlers[:], logger.level
    yield logger
    for h in logger.handlers:
        if h not in handlers:
            h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown(self):
        assert _parse_level("loud") == logging.WARNING

    def test_empty(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING


class TestResolveLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv(LEVEL_ENV, raising=False)
        assert resolve_level() == "WARNING"

    def test_env(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV, "info")
        assert resolve_level() == "info"

    def test_flags_beat_env(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV, "info")
        assert resolve_level(quiet=True) == "ERROR"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"


class TestSetupLogging:
    def test_default_level(self, pkgci_logger):
        setup_logging()
        assert pkgci_logger.level == logging.WARNING
        assert len(pkgci_logger.handlers) == 1

    def test_leaves_root_alone(self, pkgci_logger):
        root = logging.getLogger()
        before = root.handlers[:]
        setup_logging("DEBUG")
        assert root.handlers == before
        assert pkgci_logger.level == logging.DEBUG

    def test_replaces_handlers(self, pkgci_logger):
        setup_logging()
        setup_logging("INFO")
        assert len(pkgci_logger.handlers) == 1
        assert pkgci_logger.handlers[0].level == logging.INFO

    def test_file_handler(self, pkgci_logger, tmp_path: Path):
        log_file = tmp_path / "pkgci.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert pkgci_logger.level == logging.DEBUG
        assert len(pkgci_logger.handlers) == 2

        logging.getLogger("pkgci.test").debug("planned %d files", 2)
        for h in pkgci_logger.handlers:
            h.flush()
        assert "planned 2 files" in log_file.read_text()
