"""
test_logging_config.py - 로깅 설정 테스트
"""

import logging

import pytest

from src.core.logging_config import build_logging_config, setup_logging


class TestBuildLoggingConfig:
    """build_logging_config 테스트."""

    def test_level_uppercased(self):
        config = build_logging_config("debug")

        assert config["loggers"][""]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"

    def test_existing_loggers_kept(self):
        assert build_logging_config()["disable_existing_loggers"] is False

    def test_noisy_loggers_quieted(self):
        loggers = build_logging_config("DEBUG")["loggers"]

        assert loggers["uvicorn.access"]["level"] == "WARNING"
        assert loggers["httpx"]["level"] == "WARNING"


class TestSetupLogging:
    """setup_logging 테스트."""

    @pytest.fixture(autouse=True)
    def restore_root_level(self):
        root = logging.getLogger()
        level, handlers = root.level, list(root.handlers)
        yield
        root.setLevel(level)
        root.handlers = handlers

    def test_root_level_applied(self):
        setup_logging("WARNING")

        assert logging.getLogger().level == logging.WARNING

    def test_module_loggers_propagate(self):
        setup_logging("INFO")

        logger = logging.getLogger("src.core.imagekit")
        assert logger.getEffectiveLevel() == logging.INFO
