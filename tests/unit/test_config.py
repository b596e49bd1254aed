"""
Unit tests for AppConfig.
"""

import logging

import pytest

from resourceful.config import AppConfig, configure_logging


class TestAppConfig:
    """Tests for AppConfig defaults and validation."""

    def test_defaults(self):
        """Defaults are valid and local-only."""
        config = AppConfig()
        config.validate()
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.jsonp is False

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_invalid_port(self, port):
        """Ports outside 1-65535 are rejected."""
        with pytest.raises(ValueError, match="Invalid port"):
            AppConfig(port=port).validate()

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log_level"):
            AppConfig(log_level="LOUD").validate()

    def test_log_level_case_insensitive(self):
        """Log levels are accepted in any case."""
        AppConfig(log_level="debug").validate()

    def test_invalid_log_format(self):
        """Only text and json log formats exist."""
        with pytest.raises(ValueError, match="Invalid log_format"):
            AppConfig(log_format="xml").validate()

    def test_empty_jsonp_param(self):
        """The JSON-P parameter name must not be empty."""
        with pytest.raises(ValueError):
            AppConfig(jsonp_param="").validate()


class TestFromEnv:
    """Tests for AppConfig.from_env()."""

    def test_reads_variables(self, monkeypatch):
        """RESOURCEFUL_* variables populate the config."""
        monkeypatch.setenv("RESOURCEFUL_HOST", "0.0.0.0")
        monkeypatch.setenv("RESOURCEFUL_PORT", "3000")
        monkeypatch.setenv("RESOURCEFUL_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RESOURCEFUL_LOG_FORMAT", "json")
        monkeypatch.setenv("RESOURCEFUL_JSONP", "yes")

        config = AppConfig.from_env()

        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.jsonp is True

    def test_defaults_without_variables(self, monkeypatch):
        """Missing variables fall back to the defaults."""
        for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT", "JSONP"):
            monkeypatch.delenv(f"RESOURCEFUL_{name}", raising=False)

        assert AppConfig.from_env() == AppConfig()

    @pytest.mark.parametrize("value", ["0", "false", "off", ""])
    def test_jsonp_flag_off(self, monkeypatch, value):
        """Anything but a truthy word leaves JSON-P off."""
        monkeypatch.setenv("RESOURCEFUL_JSONP", value)
        assert AppConfig.from_env().jsonp is False

    def test_bad_port(self, monkeypatch):
        """A non-numeric port fails loudly."""
        monkeypatch.setenv("RESOURCEFUL_PORT", "eighty")
        with pytest.raises(ValueError):
            AppConfig.from_env()


def test_configure_logging_sets_package_level():
    """configure_logging applies the level to the package logger."""
    package_logger = logging.getLogger("resourceful")
    previous = package_logger.level
    try:
        configure_logging(AppConfig(log_level="warning"))
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(previous)
