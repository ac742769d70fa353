"""
Tests for logging configuration.
"""

import logging

import pytest

from kitmanager.core.observability.logging_config import (
    configure_from_cli,
    parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_known_levels(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_lowers_root_level(self, tmp_path):
        log_file = tmp_path / "kitmgr.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("kitmanager.test").debug("written to file")
        for h in root.handlers:
            h.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler):
                h.close()

    def test_quiets_third_party(self):
        setup_logging("INFO")
        assert logging.getLogger("yaml").level == logging.WARNING

    def test_debug_leaves_third_party_alone(self):
        setup_logging("DEBUG")
        assert logging.getLogger("yaml").level == logging.NOTSET
        assert logging.getLogger("pydantic").level == logging.NOTSET

    def test_file_level_defaults_to_console_level(self, tmp_path):
        setup_logging("ERROR", log_file=str(tmp_path / "kitmgr.log"))
        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert {h.level for h in root.handlers} == {logging.ERROR}
        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler):
                h.close()


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("KITMGR_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"
        monkeypatch.delenv("KITMGR_LOG_LEVEL")
        assert resolve_level() == "WARNING"

    def test_configure_from_cli(self, monkeypatch):
        monkeypatch.delenv("KITMGR_LOG_FILE", raising=False)
        configure_from_cli(debug=False, verbose=True, quiet=False)
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
