"""
Tests for the command line entry point.
"""

import pytest
from loguru import logger

from usersapi import __main__ as entrypoint
from usersapi.config import Settings


class TestMain:
    @pytest.fixture
    def captured(self, monkeypatch, tmp_path):
        calls: dict = {}
        messages: list[str] = []

        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
            port=8081,
            shutdown_timeout=7,
        )

        def fake_run(app, **kwargs):
            calls["app"] = app
            calls["kwargs"] = kwargs

        def fake_setup_logging(level, *, json_format=False):
            logger.add(lambda message: messages.append(str(message)), level="DEBUG")

        monkeypatch.setattr(entrypoint, "get_settings", lambda: settings)
        monkeypatch.setattr(entrypoint, "setup_logging", fake_setup_logging)
        monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)
        yield calls, messages
        logger.remove()

    def test_runs_uvicorn_with_graceful_shutdown(self, captured):
        calls, _ = captured
        entrypoint.main()
        assert calls["kwargs"]["port"] == 8081
        assert calls["kwargs"]["timeout_graceful_shutdown"] == 7

    def test_does_not_announce_listening_before_bind(self, captured):
        _, messages = captured
        entrypoint.main()
        assert not any("running on port" in m.lower() for m in messages)

    def test_invalid_configuration_exits(self, monkeypatch):
        def broken_settings():
            return Settings(_env_file=None)

        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setattr(entrypoint, "get_settings", broken_settings)
        with pytest.raises(SystemExit):
            entrypoint.main()
        logger.remove()
