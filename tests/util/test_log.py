from __future__ import annotations

import json
from pathlib import Path

import pytest

from socketlib.env.rewire import set_env
from socketlib.util.log import Log, LogFormat, LogLevel


def test_log_is_silent_by_default(capsys) -> None:  # type: ignore[no-untyped-def]
    log = Log.create({"service": "test.silent"})
    log.error("nobody hears this")
    assert capsys.readouterr().err == ""


def test_log_writes_console_and_file(tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=True, file_path=tmp_path / "dev.log")

    log = Log.create({"service": "test.log"})
    log.info("hello", {"value": 7})
    Log.close()

    stderr = capsys.readouterr().err
    text = (tmp_path / "dev.log").read_text(encoding="utf-8")

    assert "msg=hello" in stderr
    assert "service=test.log" in stderr
    assert "value=7" in text
    assert "msg=hello" in text


def test_log_supports_json_format(tmp_path: Path) -> None:
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, file_path=tmp_path / "dev.log")

    log = Log.create({"service": "test.json"})
    log.info("hello world", {"meta": {"k": "v"}})
    Log.close()

    payload = json.loads((tmp_path / "dev.log").read_text(encoding="utf-8").strip())

    assert payload["level"] == "info"
    assert payload["msg"] == "hello world"
    assert payload["service"] == "test.json"
    assert payload["meta"] == {"k": "v"}


def test_level_filtering(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.WARN, format=LogFormat.PRETTY, console=True)
    log = Log.create({"service": "test.level"})
    log.info("dropped")
    log.warn("kept")

    stderr = capsys.readouterr().err
    assert "dropped" not in stderr
    assert "WARN kept (service=test.level)" in stderr


def test_error_cause_chain_is_rendered(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.ERROR, console=True)
    try:
        try:
            raise KeyError("inner")
        except KeyError as e:
            raise RuntimeError("outer") from e
    except RuntimeError as e:
        Log.create({"service": "test.cause"}).error("failed", {"error": e})

    assert "outer Caused by: 'inner'" in capsys.readouterr().err


def test_create_caches_by_service() -> None:
    a = Log.create({"service": "test.cache"})
    assert Log.create({"service": "test.cache"}) is a
    assert Log.create({"other": 1}) is not Log.create({"other": 1})


def test_logger_exposes_only_level_methods() -> None:
    log = Log.create({"service": "test.surface"})
    for name in ("warning", "tag", "clone", "time"):
        assert not hasattr(log, name)
    assert not hasattr(Log, "file")


def test_init_from_env_enables_debug(capsys) -> None:  # type: ignore[no-untyped-def]
    set_env("DEBUG", None)
    set_env("SOCKET_DEBUG", "1")
    set_env("SOCKET_LOG_FORMAT", "json")
    Log.init_from_env()

    Log.create({"service": "test.env"}).debug("visible")

    line = capsys.readouterr().err.strip()
    assert json.loads(line)["msg"] == "visible"


def test_init_from_env_stays_silent_without_debug(capsys) -> None:  # type: ignore[no-untyped-def]
    set_env("DEBUG", None)
    set_env("SOCKET_DEBUG", None)
    set_env("SOCKET_LOG_FORMAT", "bogus")
    Log.init_from_env()

    Log.create({"service": "test.quiet"}).error("hidden")
    assert capsys.readouterr().err == ""


def test_init_from_env_reads_socket_log_level(capsys) -> None:  # type: ignore[no-untyped-def]
    set_env("DEBUG", None)
    set_env("SOCKET_DEBUG", "1")
    set_env("SOCKET_LOG_FORMAT", None)
    set_env("SOCKET_LOG_LEVEL", "warning")
    Log.init_from_env()

    log = Log.create({"service": "test.env.level"})
    log.info("dropped")
    log.warn("kept")

    stderr = capsys.readouterr().err
    assert "dropped" not in stderr
    assert "msg=kept" in stderr


def test_init_from_env_ignores_invalid_log_level(capsys) -> None:  # type: ignore[no-untyped-def]
    set_env("DEBUG", None)
    set_env("SOCKET_DEBUG", "1")
    set_env("SOCKET_LOG_FORMAT", None)
    set_env("SOCKET_LOG_LEVEL", "loud")
    Log.init_from_env()

    Log.create({"service": "test.env.badlevel"}).debug("still debug")
    assert "still debug" in capsys.readouterr().err


def test_parse_helpers() -> None:
    assert LogLevel.parse("warning") is LogLevel.WARN
    assert LogLevel.parse(None) is LogLevel.WARN
    assert LogFormat.parse("PRETTY") is LogFormat.PRETTY
    with pytest.raises(ValueError):
        LogLevel.parse("loud")
