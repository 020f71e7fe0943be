"""
Test settings loading and logging configuration.
"""

import logging

import pytest
from pydantic import ValidationError

from pwstrength.core.config import Settings
from pwstrength.core.logging_config import build_logging_config, setup_logging
from pwstrength.schemas.password_policy import PasswordPolicy


@pytest.fixture
def restore_logging():
    """Undo logging changes made by setup_logging."""
    package_logger = logging.getLogger("pwstrength")
    root = logging.getLogger()
    saved = (
        package_logger.level,
        package_logger.propagate,
        list(package_logger.handlers),
        root.level,
        list(root.handlers),
    )
    yield
    package_logger.setLevel(saved[0])
    package_logger.propagate = saved[1]
    package_logger.handlers = saved[2]
    root.setLevel(saved[3])
    root.handlers = saved[4]


class TestSettings:
    """Test suite for environment-driven settings."""

    def test_thresholds_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_ALLOWED_REPETITION_COUNT", "5")
        monkeypatch.setenv("MAX_ALLOWED_SEQUENCE_LENGTH", "4")

        settings = Settings()
        policy = PasswordPolicy.from_settings(settings)

        assert policy.max_allowed_repetition_count == 5
        assert policy.max_allowed_sequence_length == 4

    def test_negative_threshold_rejected(self, monkeypatch):
        monkeypatch.setenv("MAX_ALLOWED_SEQUENCE_LENGTH", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_environment_normalized(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        settings = Settings()

        assert settings.environment == "production"
        assert settings.is_production is True

    def test_unknown_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "moon")
        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"


class TestLoggingConfig:
    """Test suite for logging setup."""

    def test_production_uses_json_formatter(self):
        config = build_logging_config(Settings(environment="production"))
        assert config["handlers"]["console"]["formatter"] == "json"

    def test_development_uses_detailed_formatter(self):
        config = build_logging_config(Settings(environment="development"))
        assert config["handlers"]["console"]["formatter"] == "detailed"

    def test_debug_overrides_log_level(self):
        config = build_logging_config(Settings(debug=True, log_level="ERROR"))
        assert config["loggers"]["pwstrength"]["level"] == "DEBUG"

    def test_setup_logging_configures_package_logger(self, restore_logging):
        setup_logging(Settings(log_level="WARNING"))
        assert logging.getLogger("pwstrength").level == logging.WARNING

    def test_fallback_is_logged(self, monkeypatch, caplog):
        from pwstrength.core import password_strength

        monkeypatch.setattr(password_strength, "MAX_COUNT", 1)
        with caplog.at_level(logging.ERROR, logger="pwstrength"):
            assert password_strength.max_repetition_count("aa") == 0

        assert "exceeds" in caplog.text
