"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from dirjson.config.logging import configure_logging
from dirjson.config.settings import DirJsonSettings
from dirjson.domain.directories import Directory
from dirjson.infrastructure.directories import DirectoryResolver


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dj = logging.getLogger("dirjson")
    dj_level = dj.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dj.setLevel(dj_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dirjson").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dirjson").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("dirjson.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dirjson.test"
        assert "timestamp" in parsed

    def test_custom_handler_is_the_sink(self) -> None:
        stream = io.StringIO()
        configure_logging(log_json=True, handler=logging.StreamHandler(stream))
        structlog.get_logger("dirjson.test").warning("to the sink", location="/x")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "to the sink"
        assert parsed["location"] == "/x"

    def test_stdlib_logger_gets_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, handler=logging.StreamHandler(stream))
        logging.getLogger("dirjson.infrastructure.directories").debug("Resolved documents")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "Resolved documents"
        assert parsed["level"] == "debug"

    def test_debug_hidden_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, handler=logging.StreamHandler(stream))
        structlog.get_logger("dirjson.test").debug("quiet")
        assert stream.getvalue() == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestSettingsWiring:
    def test_settings_drive_level_and_mode(self) -> None:
        stream = io.StringIO()
        settings = DirJsonSettings(verbose=True, log_json=True)
        configure_logging(settings, handler=logging.StreamHandler(stream))
        assert logging.getLogger("dirjson").level == logging.DEBUG
        structlog.get_logger("dirjson.test").debug("from settings")
        assert json.loads(stream.getvalue().strip())["event"] == "from settings"

    def test_env_vars_reach_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIRJSON_VERBOSE", "true")
        monkeypatch.setenv("DIRJSON_LOG_JSON", "true")
        stream = io.StringIO()
        configure_logging(handler=logging.StreamHandler(stream))
        structlog.get_logger("dirjson.test").debug("from env")
        assert json.loads(stream.getvalue().strip())["event"] == "from env"

    def test_keyword_beats_settings(self) -> None:
        configure_logging(DirJsonSettings(verbose=True), verbose=False)
        assert logging.getLogger("dirjson").level == logging.WARNING

    def test_returns_installed_handler(self) -> None:
        handler = logging.StreamHandler(io.StringIO())
        assert configure_logging(handler=handler) is handler
        assert logging.getLogger().handlers == [handler]

    def test_resolver_events_are_structured(self, tmp_path: Path) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, handler=logging.StreamHandler(stream))
        DirectoryResolver(DirJsonSettings(root=tmp_path)).resolve(Directory.CACHES)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "resolved"
        assert parsed["directory"] == "caches"
        assert parsed["path"] == str(tmp_path / "caches")
