"""
Tests for configuration and logging setup.
"""

import json
import logging

import pytest

from archhint.completion.document import Position
from archhint.completion.engine import CompletionEngine
from archhint.config import Config, resolve_schema_path
from archhint.schema.loader import BUNDLED_SCHEMA
from archhint.utils.logger import ArchHintLogger, JsonFormatter, logger


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ARCHHINT_SCHEMA_PATH", "ARCHHINT_LOG_LEVEL", "ARCHHINT_LOG_DIR",
                 "ARCHHINT_LOG_JSON", "ARCHHINT_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_logger():
    yield logger
    for handler in logger.logger.handlers:
        handler.close()
    logger.logger.handlers.clear()
    logger.logger.setLevel(logging.NOTSET)
    logger.log_dir = None


class TestConfig:
    def test_defaults(self, clean_env):
        config = Config()
        assert config.schema_path == BUNDLED_SCHEMA
        assert config.log_level == "INFO"
        assert config.log_dir is None
        assert not config.log_json
        assert not config.enable_logging

    def test_environment(self, clean_env, tmp_path):
        clean_env.setenv("ARCHHINT_SCHEMA_PATH", str(tmp_path / "custom.yaml"))
        clean_env.setenv("ARCHHINT_LOG_LEVEL", "DEBUG")
        clean_env.setenv("ARCHHINT_LOG_JSON", "TRUE")
        config = Config()
        assert config.schema_path == tmp_path / "custom.yaml"
        assert config.log_level == "DEBUG"
        assert config.log_json

    def test_workspace_metadata(self, clean_env, tmp_path):
        (tmp_path / "metadata.yaml").write_text("spec: {}", encoding="utf-8")
        assert Config(workspace=str(tmp_path)).schema_path == tmp_path / "metadata.yaml"

    def test_explicit_path_wins(self, tmp_path):
        (tmp_path / "metadata.yaml").write_text("spec: {}", encoding="utf-8")
        assert resolve_schema_path("other.yaml", str(tmp_path)).name == "other.yaml"

    def test_workspace_without_metadata(self, tmp_path):
        assert resolve_schema_path(None, str(tmp_path)) == BUNDLED_SCHEMA


class TestLogger:
    def test_singleton(self):
        assert ArchHintLogger() is logger

    def test_schema_failure_logged(self, clean_env, tmp_path, restore_logger):
        clean_env.setenv("ARCHHINT_LOGGING", "true")
        clean_env.setenv("ARCHHINT_LOG_DIR", str(tmp_path / "logs"))
        Config().configure_logging()

        CompletionEngine(tmp_path / "missing.yaml").provide_completions("", Position(0, 0))

        error_log = (tmp_path / "logs" / "error.log").read_text(encoding="utf-8")
        assert "Failed to load" in error_log
        assert "[SCHEMA  ]" in error_log

    def test_levels_go_to_separate_files(self, tmp_path, restore_logger):
        logger.configure(level="DEBUG", log_dir=str(tmp_path))
        logger.suggestions("Domain", 3)
        logger.warning("engine", "careful")

        assert "3 suggestions (Domain)" in (tmp_path / "info.log").read_text(encoding="utf-8")
        assert "WARNING: careful" in (tmp_path / "warning.log").read_text(encoding="utf-8")
        assert "careful" not in (tmp_path / "info.log").read_text(encoding="utf-8")

    def test_disabled(self, tmp_path, restore_logger):
        logger.configure(log_dir=str(tmp_path / "logs"), enable_logging=False)
        assert not (tmp_path / "logs").exists()

    def test_json_formatter(self):
        record = logging.LogRecord("archhint", logging.INFO, __file__, 1, "hello", None, None)
        record.component = "ENGINE"
        record.count = 2
        data = json.loads(JsonFormatter().format(record))
        assert data["message"] == "hello"
        assert data["component"] == "ENGINE"
        assert data["count"] == 2
