"""
Unit tests for Settings and logging configuration
"""

import logging
import logging.handlers

import pytest
from pydantic import ValidationError

from config.constants import SENTINEL_VALUES, DEFAULT_WRAP_MODE
from config.logging_config import setup_logger
from config.settings import Settings


class TestSettings:
    """Test environment-driven formatter settings"""

    def test_defaults(self):
        s = Settings(_env_file=None)

        assert s.sentinels == SENTINEL_VALUES
        assert s.wrap_mode == DEFAULT_WRAP_MODE
        assert s.log_level == "INFO"
        assert s.log_file is None

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("MATHFMT_ERROR_SENTINEL", "Sintaxis inválida")
        monkeypatch.setenv("MATHFMT_WRAP_MODE", "Display")

        s = Settings(_env_file=None)

        assert s.sentinels == ("0", "Sintaxis inválida")
        assert s.wrap_mode == "display"

    def test_invalid_wrap_mode(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, wrap_mode="block")

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")


class TestLoggingConfig:
    """Test setup_logger handler wiring"""

    def test_console_only_by_default(self):
        logger = setup_logger("mathfmt.test.console")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_handlers_added_once(self):
        first = setup_logger("mathfmt.test.once")
        second = setup_logger("mathfmt.test.once", level="DEBUG")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG

    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "mathfmt.log"
        logger = setup_logger("mathfmt.test.file", log_file=str(log_file))

        assert log_file.parent.exists()
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)

        for handler in logger.handlers:
            handler.close()
