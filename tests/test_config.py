"""
Tests for settings, logging setup and the CLI.

No server is started: uvicorn is patched out.
"""

import logging
from unittest.mock import patch

import pytest

from todo_service.cli import build_parser, main
from todo_service.core.config import Settings
from todo_service.shared.logging import configure_logging, resolve_level


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WEB_BIND_ADDR", raising=False)
        settings = Settings(_env_file=None)

        assert settings.web_bind_addr == "127.0.0.1:8080"
        assert settings.bind_host == "127.0.0.1"
        assert settings.bind_port == 8080
        assert settings.rate_limit_enabled is True

    def test_bind_addr_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEB_BIND_ADDR", "0.0.0.0:9000")

        settings = Settings(_env_file=None)

        assert settings.bind_host == "0.0.0.0"
        assert settings.bind_port == 9000

    @pytest.mark.parametrize("addr", ["localhost", ":8080", "localhost:http"])
    def test_bad_bind_addr(self, addr: str) -> None:
        settings = Settings(web_bind_addr=addr, _env_file=None)

        with pytest.raises(ValueError):
            settings.bind_port


class TestLogging:
    """Tests for the logging configuration helper."""

    def test_resolve_level(self) -> None:
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING
        assert resolve_level("nonsense") == logging.INFO

    def test_configure_sets_root_level(self) -> None:
        configure_logging("ERROR")
        try:
            assert logging.getLogger().level == logging.ERROR
            assert logging.getLogger("uvicorn.access").level == logging.ERROR
        finally:
            configure_logging("INFO")

    def test_access_log_kept_at_info(self) -> None:
        configure_logging("INFO")

        assert logging.getLogger("uvicorn.access").getEffectiveLevel() == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_access_log_follows_level_after_reconfigure(self) -> None:
        configure_logging("ERROR")
        configure_logging("INFO")

        assert logging.getLogger("uvicorn.access").isEnabledFor(logging.INFO)


class TestCli:
    """Tests for the command line entry point."""

    def test_serve_requires_no_arguments(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.bind is None
        assert args.log_level is None

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_serve_runs_uvicorn_on_bind_addr(self) -> None:
        with patch("uvicorn.run") as run:
            main(["serve", "--bind", "0.0.0.0:9001", "--log-level", "WARNING"])

        run.assert_called_once()
        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9001
