"""
Unit Tests for Settings and Logging
===================================

Environment-driven client settings and logging configuration.
"""

from unittest.mock import patch

import pytest
import structlog

from htmlcsstoimage.config.logging import get_logger, get_logging_config, setup_logging
from htmlcsstoimage.config.settings import (
    DEFAULT_BASE_URL,
    ClientSettings,
    get_settings,
    reload_settings,
)


class TestClientSettings:
    """Test settings loading and validation."""

    def test_defaults(self):
        settings = ClientSettings()
        assert settings.api_id is None
        assert settings.api_key is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.request_timeout == 30.0

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("HCTI_API_ID", "env_id")
        monkeypatch.setenv("HCTI_API_KEY", "env_key")
        settings = ClientSettings()
        assert settings.api_id == "env_id"
        assert settings.api_key == "env_key"

    def test_base_url_trailing_slash_is_stripped(self, monkeypatch):
        monkeypatch.setenv("HCTI_BASE_URL", "https://staging.hcti.test/")
        assert ClientSettings().base_url == "https://staging.hcti.test"

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            ClientSettings(environment="staging")

    def test_log_level_is_upper_cased(self):
        assert ClientSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            ClientSettings(log_level="verbose")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            ClientSettings(request_timeout=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reload_settings_reads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("HCTI_API_ID", "reloaded")
        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.api_id == "reloaded"
        assert get_settings() is reloaded


class TestLogging:
    """Test logging configuration."""

    def test_console_formatter_outside_production(self):
        config = get_logging_config(ClientSettings(environment="development"))
        assert config["handlers"]["console"]["formatter"] == "standard"

    def test_json_formatter_in_production(self):
        config = get_logging_config(ClientSettings(environment="production"))
        assert config["handlers"]["console"]["formatter"] == "json"

    def test_package_logger_level(self):
        config = get_logging_config(ClientSettings(log_level="WARNING"))
        assert config["loggers"]["htmlcsstoimage"]["level"] == "WARNING"

    def test_setup_logging_configures_structlog_and_stdlib(self):
        settings = ClientSettings(environment="production", log_level="DEBUG")
        with patch("htmlcsstoimage.config.logging.structlog.configure") as configure, \
                patch("htmlcsstoimage.config.logging.logging.config.dictConfig") as dict_config:
            setup_logging(settings)

        processors = configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        dict_config.assert_called_once_with(get_logging_config(settings))

    def test_get_logger_binds(self):
        logger = get_logger("htmlcsstoimage.tests")
        assert logger.bind(component="tests") is not None
