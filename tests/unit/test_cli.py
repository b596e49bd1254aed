"""
Unit tests for the development server command line.
"""

import pytest

from resourceful.__main__ import build_parser, config_from_args, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RESOURCEFUL_* variables from the outer environment out."""
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT", "JSONP"):
        monkeypatch.delenv(f"RESOURCEFUL_{name}", raising=False)


class TestArguments:
    """Tests for flag parsing and config overrides."""

    def test_no_flags_uses_defaults(self):
        """Without flags the environment defaults stand."""
        config = config_from_args(build_parser().parse_args([]))
        assert (config.host, config.port, config.jsonp) == ("127.0.0.1", 8080, False)

    def test_flags_override(self):
        """Flags replace config values."""
        args = build_parser().parse_args(
            ["--host", "0.0.0.0", "-p", "3000", "--log-level", "DEBUG", "--log-format", "json", "--jsonp"]
        )
        config = config_from_args(args)

        assert config.host == "0.0.0.0"
        assert config.port == 3000
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.jsonp is True

    def test_flags_beat_environment(self, monkeypatch):
        """A flag wins over the matching environment variable."""
        monkeypatch.setenv("RESOURCEFUL_PORT", "9000")
        assert config_from_args(build_parser().parse_args(["--port", "9100"])).port == 9100
        assert config_from_args(build_parser().parse_args([])).port == 9000

    def test_unknown_log_level(self):
        """argparse rejects log levels outside the known set."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "LOUD"])


class TestMain:
    """Tests for main() failing before it serves."""

    def test_invalid_port(self, capsys):
        """An out-of-range port exits with status 2."""
        assert main(["--port", "70000"]) == 2
        assert "Invalid port" in capsys.readouterr().err

    def test_invalid_port_from_environment(self, monkeypatch, capsys):
        """A malformed RESOURCEFUL_PORT exits with status 2."""
        monkeypatch.setenv("RESOURCEFUL_PORT", "eighty")
        assert main([]) == 2
        assert capsys.readouterr().err.startswith("error:")
