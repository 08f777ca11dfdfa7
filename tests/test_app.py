"""Tests for application setup: config, startup and CLI"""

import logging

import pytest
from fastapi.testclient import TestClient

from bugtracker import cli
from bugtracker.config import Settings
from bugtracker.logging_config import setup_logging
from bugtracker.main import create_app
from bugtracker.storage.migrations import needs_migration


class TestSettings:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        for name in ("BUGTRACKER_DATABASE_URL", "HOST", "PORT", "BUGTRACKER_CORS_ORIGINS",
                     "BUGTRACKER_LOG_LEVEL", "BUGTRACKER_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.database_url == "sqlite:///bugtracker.db"
        assert settings.host == "127.0.0.1"
        assert settings.port == 5000
        assert settings.cors_origins == ["*"]
        assert settings.log_level == "INFO"
        assert settings.log_dir is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BUGTRACKER_DATABASE_URL", "sqlite:////tmp/other.db")
        monkeypatch.setenv("PORT", "8081")
        monkeypatch.setenv("BUGTRACKER_CORS_ORIGINS", "http://localhost:3000, http://127.0.0.1:3000")
        monkeypatch.setenv("BUGTRACKER_LOG_LEVEL", "debug")

        settings = Settings.from_env(load_dotenv_file=False)

        assert settings.database_url == "sqlite:////tmp/other.db"
        assert settings.port == 8081
        assert settings.cors_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]
        assert settings.log_level == "DEBUG"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")

        with pytest.raises(ValueError):
            Settings.from_env(load_dotenv_file=False)


def test_startup_connects_and_migrates(database_url):
    """Test an app without an injected database builds one on startup"""
    app = create_app(Settings(database_url=database_url))

    with TestClient(app) as client:
        assert app.state.bug_service is not None
        response = client.post("/api/bugs", json={
            "title": "Startup bug",
            "description": "Created after startup migration",
            "reportedBy": "tester",
        })
        assert response.status_code == 201

    assert needs_migration(database_url) is False


def test_cors_headers(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_request_logging(client, caplog):
    with caplog.at_level(logging.INFO, logger="bugtracker.main"):
        client.get("/api/health")

    assert any("GET /api/health" in record.getMessage() for record in caplog.records)


def test_setup_logging_file_handler(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        setup_logging("DEBUG", str(tmp_path / "logs"))
        logging.getLogger("bugtracker.test").info("written to file")
        for handler in root_logger.handlers:
            handler.flush()

        log_files = list((tmp_path / "logs").glob("bugtracker_*.log"))
        assert len(log_files) == 1
        assert "written to file" in log_files[0].read_text()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)


class TestCli:
    """Test the command line entry point"""

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)

    def test_init_creates_schema(self, database_url, capsys):
        assert cli.main(["init", "--database-url", database_url]) == 0

        assert needs_migration(database_url) is False
        assert "Bug database ready" in capsys.readouterr().out

    def test_serve_runs_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(cli.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

        assert cli.main(["serve", "--host", "0.0.0.0", "--port", "9000"]) == 0

        args, kwargs = calls[0]
        assert args == ("bugtracker.main:app",)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is False

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "usage" in capsys.readouterr().out
