"""Environment variable rewiring.

Every environment getter in this package reads through ``get_env_value``
instead of ``os.environ``, so tests can substitute values without touching the
real process environment.

Two override layers sit above ``os.environ``:

1. Scoped overrides installed with ``with_env`` / ``run_with_env``. They live
   in a ContextVar, so they only apply to the current thread or asyncio task
   and disappear when the scope exits.
2. Process-wide overrides installed with ``set_env``. They persist until
   ``clear_env`` / ``reset_env``; test suites call ``reset_env`` after every
   test.

Each key is in one of three states per layer: not overridden, overridden to a
string, or overridden to absent (``set_env(key, None)``). The last state makes
``get_env_value`` return None even when ``os.environ`` has the key.

Example:
    from socketlib.env.ci import get_ci
    from socketlib.env.rewire import reset_env, set_env, with_env

    set_env("CI", "1")
    assert get_ci() is True

    with with_env({"CI": None}):
        assert get_ci() is False

    reset_env()
"""

import inspect
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, TypeVar

from ..util.log import Log

log = Log.create({"service": "env.rewire"})

T = TypeVar("T")


@dataclass(frozen=True)
class Override:
    """A recorded override; ``value`` is None for an explicit unset."""

    value: Optional[str]


# Missing key means "not overridden"; an Override(None) entry means "absent".
_overrides: Dict[str, Override] = {}
_lock = threading.Lock()

_EMPTY_SCOPE: Mapping[str, Override] = MappingProxyType({})
_scope_var: ContextVar[Mapping[str, Override]] = ContextVar(
    "socketlib_env_scope", default=_EMPTY_SCOPE
)


def get_env_value(key: str) -> Optional[str]:
    """Read an environment variable, honouring overrides.

    Resolution order:
        1. Scoped overrides (``with_env``), innermost first
        2. Process-wide overrides (``set_env``)
        3. ``os.environ``, read live on every call

    Returns:
        The variable value, or None when it is absent or overridden as unset
    """
    scoped = _scope_var.get().get(key)
    if scoped is not None:
        return scoped.value

    with _lock:
        override = _overrides.get(key)
    if override is not None:
        return override.value

    return os.environ.get(key)


def set_env(key: str, value: Optional[str]) -> None:
    """Override an environment variable for all env getters.

    ``os.environ`` is not modified. Passing None records an explicit unset:
    getters will report the variable as absent even if it is really set.
    """
    with _lock:
        _overrides[key] = Override(value)
    log.debug("set override", {"key": key, "unset": value is None})


def clear_env(key: str) -> None:
    """Remove the override for ``key``; a no-op when there is none."""
    with _lock:
        removed = _overrides.pop(key, None)
    if removed is not None:
        log.debug("cleared override", {"key": key})


def reset_env() -> None:
    """Remove every process-wide override.

    Scoped overrides are owned by their ``with_env`` block and are left alone.
    """
    with _lock:
        count = len(_overrides)
        _overrides.clear()
    if count:
        log.debug("reset overrides", {"count": count})


def has_override(key: str) -> bool:
    """Whether ``key`` is overridden in the current scope or process-wide.

    True for both value overrides and explicit unsets.
    """
    if key in _scope_var.get():
        return True
    with _lock:
        return key in _overrides


def has_scoped_overrides() -> bool:
    """Whether a ``with_env`` scope with any overrides is active here."""
    return bool(_scope_var.get())


def _merged_scope(overrides: Mapping[str, Optional[str]]) -> Mapping[str, Override]:
    merged = dict(_scope_var.get())
    for key, value in overrides.items():
        merged[key] = Override(value)
    return MappingProxyType(merged)


@contextmanager
def with_env(overrides: Mapping[str, Optional[str]]) -> Iterator[None]:
    """Apply overrides to the current context only.

    Works around both sync code and ``await`` points; concurrent tasks and
    other threads keep seeing their own overrides. Nested blocks shadow outer
    ones key by key, and the previous scope is restored on exit even when the
    body raises.

    Example:
        with with_env({"CI": "1", "HOME": None}):
            assert get_ci() is True
            assert get_home() is None
    """
    token = _scope_var.set(_merged_scope(overrides))
    try:
        yield
    finally:
        _scope_var.reset(token)


async def _await_in_scope(scope: Mapping[str, Override], awaitable: Awaitable[T]) -> T:
    token = _scope_var.set(scope)
    try:
        return await awaitable
    finally:
        _scope_var.reset(token)


def run_with_env(
    overrides: Mapping[str, Optional[str]],
    fn: Callable[..., Any],
    *args: Any,
    **kwargs: Any,
) -> Any:
    """Call ``fn`` with scoped overrides applied.

    If ``fn`` returns an awaitable, a coroutine is returned that awaits it
    with the overrides still in place, so async callers write
    ``await run_with_env({...}, coro_fn)``.
    """
    scope = _merged_scope(overrides)
    token = _scope_var.set(scope)
    try:
        result = fn(*args, **kwargs)
    finally:
        _scope_var.reset(token)

    if inspect.isawaitable(result):
        return _await_in_scope(scope, result)
    return result


class EnvRewire:
    """Namespace class for environment rewiring operations."""

    get = staticmethod(get_env_value)
    set = staticmethod(set_env)
    clear = staticmethod(clear_env)
    reset = staticmethod(reset_env)
    has = staticmethod(has_override)
    scope = staticmethod(with_env)
    run = staticmethod(run_with_env)
