import logging

import pytest

from filedrop_backend import cli
from filedrop_backend.app.core.config import Settings


def test_defaults(monkeypatch):
    for var in ("STORAGE_DIR", "STATIC_DIR", "FILEDROP_HOST", "FILEDROP_PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)

    s = Settings()
    assert s.STORAGE_DIR == "/data"
    assert s.STATIC_DIR == "./static"
    assert s.HOST == "0.0.0.0"
    assert s.PORT == 8080
    assert s.LOG_LEVEL == "INFO"
    assert s.CORS_ORIGINS == ["*"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_DIR", "/srv/uploads")
    monkeypatch.setenv("FILEDROP_PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")

    s = Settings()
    assert s.STORAGE_DIR == "/srv/uploads"
    assert s.PORT == 9090
    assert s.LOG_LEVEL == "DEBUG"
    assert s.CORS_ORIGINS == ["http://a.example", "http://b.example"]


def test_explicit_arguments_beat_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_DIR", "/from/env")
    monkeypatch.setenv("FILEDROP_PORT", "9090")

    s = Settings(storage_dir="/from/arg", port=0)
    assert s.STORAGE_DIR == "/from/arg"
    assert s.PORT == 0


def test_cli_flags_build_settings():
    args = cli.build_parser().parse_args(
        ["--port", "8181", "--storage-dir", "/tmp/x", "--host", "127.0.0.1"]
    )
    s = cli.settings_from_args(args)
    assert s.PORT == 8181
    assert s.STORAGE_DIR == "/tmp/x"
    assert s.HOST == "127.0.0.1"


def test_cli_main_creates_storage_and_runs(monkeypatch, tmp_path):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    storage = tmp_path / "nested" / "data"

    rc = cli.main(["--storage-dir", str(storage), "--port", "8123", "--log-level", "warning"])

    assert rc == 0
    assert storage.is_dir()
    assert calls["port"] == 8123
    assert calls["log_level"] == "warning"
    assert calls["app"].state.settings.STORAGE_DIR == str(storage)


def test_cli_main_fails_when_storage_cannot_be_created(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: pytest.fail("server should not start"))
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with caplog.at_level(logging.ERROR, logger="filedrop.cli"):
        rc = cli.main(["--storage-dir", str(blocker / "data")])

    assert rc == 1
    assert "Cannot create storage directory" in caplog.text
