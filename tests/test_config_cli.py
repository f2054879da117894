"""
Tests for settings loading, logging setup and the service CLI.
"""

import logging

import pytest

from shopkart import cli
from shopkart.core.config import DEFAULT_REDACTED_DETAILS, Settings
from shopkart.shared.logging import ERROR_LOGGER_NAME, configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.project_name == "ShopKart"
        assert settings.redact_internal_errors is False
        assert settings.redacted_error_details == DEFAULT_REDACTED_DETAILS

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Redaction can be switched on from the environment."""
        monkeypatch.setenv("REDACT_INTERNAL_ERRORS", "true")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.redact_internal_errors is True
        assert settings.log_level == "DEBUG"


class TestCli:
    """Tests for the serve command."""

    def test_serve_defaults(self) -> None:
        args = cli.build_parser().parse_args(["serve"])
        assert args.host == "0.0.0.0"
        assert args.port == 8000
        assert args.reload is False

    def test_serve_runs_uvicorn(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(
            "uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs))
        )
        cli.main(["serve", "--port", "9000", "--reload"])
        assert calls == [
            (
                "shopkart.main:app",
                {"host": "0.0.0.0", "port": 9000, "reload": True},
            )
        ]

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_error_loggers_get_their_own_level(self) -> None:
        configure_logging(level="INFO", error_log_level="error")
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger(ERROR_LOGGER_NAME).level == logging.ERROR
        assert logging.getLogger(
            "shopkart.shared.errors.handlers"
        ).getEffectiveLevel() == logging.ERROR

    def test_error_loggers_follow_root_by_default(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger(ERROR_LOGGER_NAME).level == logging.NOTSET
        assert logging.getLogger(
            "shopkart.shared.errors.middleware"
        ).getEffectiveLevel() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty", error_log_level="louder")
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger(ERROR_LOGGER_NAME).level == logging.NOTSET
        configure_logging()
