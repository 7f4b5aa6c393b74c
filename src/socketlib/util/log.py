"""Structured logging for socketlib.

Loggers are tagged (``Log.create({"service": "env.rewire"})``) and emit
key=value, JSON or pretty lines. The library is silent by default: nothing is
written until a sink is enabled through ``Log.configure`` or
``Log.init_from_env``.
"""

import json
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO


class LogLevel(str, Enum):
    """Log severity levels, lowest first."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        """Parse a level name; None means the default WARN level."""
        if value is None:
            return cls.WARN
        text = value.strip().upper()
        if text == "WARNING":
            return cls.WARN
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid log level: {value}") from None


_LEVEL_ORDER = list(LogLevel)


class LogFormat(str, Enum):
    """Log line format."""

    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


@dataclass
class _Sinks:
    level: LogLevel = LogLevel.WARN
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: Optional[TextIO] = None

    @property
    def enabled(self) -> bool:
        return self.console or self.file is not None


_sinks = _Sinks()
_last_emit = time.monotonic()

# Payload keys rendered in fixed positions rather than as trailing pairs.
_HEADER_KEYS = ("time", "delta_ms", "level", "msg")


def _describe(value: Any) -> Any:
    """Convert a tag value into something JSON-serialisable."""
    if isinstance(value, BaseException):
        from .error import format_error
        return format_error(value) or str(value)
    if value is None or isinstance(value, (bool, int, float, str, dict, list, tuple)):
        return value
    return str(value)


def _kv(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    text = str(value)
    if not text or "=" in text or any(ch.isspace() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _pairs(payload: Dict[str, Any]) -> str:
    return " ".join(f"{k}={_kv(v)}" for k, v in payload.items() if k not in _HEADER_KEYS)


def _render_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _render_kv(payload: Dict[str, Any]) -> str:
    head = f"{payload['time']} +{payload['delta_ms']}ms level={payload['level']} msg={_kv(payload['msg'])}"
    tail = _pairs(payload)
    return f"{head} {tail}" if tail else head


def _render_pretty(payload: Dict[str, Any]) -> str:
    level = payload["level"].upper()
    tail = _pairs(payload)
    extra = f" ({tail})" if tail else ""
    return f"{payload['time']} {level} {payload['msg'] or ''}{extra} +{payload['delta_ms']}ms"


_RENDERERS: Dict[LogFormat, Callable[[Dict[str, Any]], str]] = {
    LogFormat.KV: _render_kv,
    LogFormat.JSON: _render_json,
    LogFormat.PRETTY: _render_pretty,
}


class Logger:
    """Tagged logger; tags are merged into every line it writes."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = dict(tags or {})

    def _emit(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        global _last_emit

        if not _sinks.enabled or level.rank < _sinks.level.rank:
            return

        now = time.monotonic()
        delta_ms, _last_emit = int((now - _last_emit) * 1000), now

        payload: Dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "delta_ms": delta_ms,
            "level": level.value.lower(),
            "msg": _describe(message),
        }
        for key, value in {**self.tags, **(extra or {})}.items():
            if value is not None:
                payload[key] = _describe(value)

        line = _RENDERERS[_sinks.format](payload) + "\n"
        if _sinks.console:
            sys.stderr.write(line)
            sys.stderr.flush()
        if _sinks.file is not None:
            _sinks.file.write(line)
            _sinks.file.flush()

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.ERROR, message, extra)


class Log:
    """Logger factory and global sink configuration."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Create a logger; loggers with a 'service' tag are cached by it."""
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags)
        if service not in cls._loggers:
            cls._loggers[service] = Logger(tags)
        return cls._loggers[service]

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file_path: str | Path | None = None,
    ) -> None:
        """Change level, format and sinks.

        ``file_path`` opens (truncating) a log file as an extra sink; omitting
        it closes any file opened by an earlier call.
        """
        if level is not None:
            _sinks.level = level
        if format is not None:
            _sinks.format = format
        if console is not None:
            _sinks.console = console

        cls.close()
        if file_path is not None:
            path = Path(file_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            _sinks.file = path.open("w", encoding="utf-8")

    @classmethod
    def init_from_env(cls) -> None:
        """Configure console output from the (rewired) environment.

        SOCKET_DEBUG or DEBUG turns on console output at DEBUG level unless
        SOCKET_LOG_LEVEL names another level. SOCKET_LOG_FORMAT selects the
        line format. Unrecognised values fall back to the defaults.
        """
        from ..env.debug import get_debug
        from ..env.rewire import get_env_value
        from ..env.socket import get_socket_debug

        debug = bool(get_socket_debug() or get_debug())
        level_name = get_env_value("SOCKET_LOG_LEVEL")
        try:
            level = LogLevel.parse(level_name) if level_name else None
        except ValueError:
            level = None
        try:
            fmt = LogFormat.parse(get_env_value("SOCKET_LOG_FORMAT"))
        except ValueError:
            fmt = LogFormat.KV

        if debug:
            cls.configure(level=level or LogLevel.DEBUG, format=fmt, console=True)
        else:
            cls.configure(level=level or LogLevel.WARN, format=fmt)

    @classmethod
    def reset(cls) -> None:
        """Restore the silent default configuration."""
        cls.close()
        _sinks.level = LogLevel.WARN
        _sinks.format = LogFormat.KV
        _sinks.console = False

    @classmethod
    def close(cls) -> None:
        """Close the log file sink if one is open."""
        if _sinks.file is not None:
            _sinks.file.close()
            _sinks.file = None
