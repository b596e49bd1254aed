"""
=============================================================================
APPLICATION CONFIGURATION
=============================================================================

Settings for the application and the development server, in one typed
dataclass with environment loading and fail-fast validation.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    code          AppConfig(port=3000, log_level="DEBUG")
    environment   AppConfig.from_env()     (RESOURCEFUL_* variables)
    CLI           python -m resourceful --port 3000

Validate once at startup; a bad port or log level should stop the process
before it serves anything.

=============================================================================
"""

import logging
import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")

LOG_LINE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    """
    Configuration for an Application and the development server.

        AppConfig(host="0.0.0.0", port=8080, jsonp=True)
    """

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK (development server only)
    # ─────────────────────────────────────────────────────────────────────

    host: str = "127.0.0.1"
    """Interface to bind; "0.0.0.0" for containers."""

    port: int = 8080
    """Port to listen on."""

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """Level for the "resourceful" loggers (DEBUG, INFO, WARNING, ...)."""

    log_format: str = "text"
    """Access log format: "text" or "json"."""

    # ─────────────────────────────────────────────────────────────────────
    # MIDDLEWARE
    # ─────────────────────────────────────────────────────────────────────

    jsonp: bool = False
    """Enable JSON-P padding of responses."""

    jsonp_param: str = "callback"
    """Query parameter carrying the JSON-P callback name."""

    server_name: str = "resourceful/0.1"
    """Value of the Server header written by the development server."""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Create configuration from environment variables.

            RESOURCEFUL_HOST        (default: 127.0.0.1)
            RESOURCEFUL_PORT        (default: 8080)
            RESOURCEFUL_LOG_LEVEL   (default: INFO)
            RESOURCEFUL_LOG_FORMAT  (default: text)
            RESOURCEFUL_JSONP       (default: off; 1/true/yes/on enables)
        """
        return cls(
            host=os.getenv("RESOURCEFUL_HOST", "127.0.0.1"),
            port=int(os.getenv("RESOURCEFUL_PORT", "8080")),
            log_level=os.getenv("RESOURCEFUL_LOG_LEVEL", "INFO"),
            log_format=os.getenv("RESOURCEFUL_LOG_FORMAT", "text"),
            jsonp=_env_flag(os.getenv("RESOURCEFUL_JSONP", "")),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: On the first invalid setting.
        """
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}. Must be 1-65535.")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}.")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'.")

        if not self.jsonp_param:
            raise ValueError("jsonp_param must not be empty")


def configure_logging(config: AppConfig) -> None:
    """Configure the root logger and the "resourceful" logger from config."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_LINE_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logging.getLogger("resourceful").setLevel(level)
