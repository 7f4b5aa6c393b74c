"""Path rewiring.

Computed paths are cached per key. Tests can pin a path with ``set_path``
and restore the computed value with ``clear_path`` / ``reset_paths``; every
mutation drops the cache and notifies registered invalidation callbacks so
dependent modules can drop their own caches too.
"""

import threading
from typing import Callable, Dict, List, Optional

from ..env.rewire import Override, has_scoped_overrides
from ..util.error import format_error, format_unknown_error
from ..util.log import Log

log = Log.create({"service": "paths.rewire"})

_overrides: Dict[str, Override] = {}
_cache: Dict[str, str] = {}
_callbacks: List[Callable[[], None]] = []
_lock = threading.RLock()


def get_path_value(key: str, compute: Callable[[], str]) -> Optional[str]:
    """Return the override for ``key``, else the cached or freshly computed path.

    An explicit ``set_path(key, None)`` override yields None. Inside a
    ``with_env`` scope the cache is bypassed in both directions: the path is
    recomputed from the scoped env and not stored for other contexts.
    """
    scoped = has_scoped_overrides()
    with _lock:
        override = _overrides.get(key)
        if override is not None:
            return override.value
        cached = None if scoped else _cache.get(key)
    if cached is not None:
        return cached

    value = compute()
    if scoped:
        return value
    with _lock:
        # A mutation during compute() may have installed an override.
        override = _overrides.get(key)
        if override is not None:
            return override.value
        _cache[key] = value
    return value


def set_path(key: str, value: Optional[str]) -> None:
    with _lock:
        _overrides[key] = Override(value)
    log.debug("set path override", {"key": key})
    invalidate_caches()


def clear_path(key: str) -> None:
    with _lock:
        _overrides.pop(key, None)
    invalidate_caches()


def reset_paths() -> None:
    """Remove every path override and drop all cached paths."""
    with _lock:
        _overrides.clear()
    invalidate_caches()


def has_override(key: str) -> bool:
    with _lock:
        return key in _overrides


def register_cache_invalidation(callback: Callable[[], None]) -> Callable[[], None]:
    """Register a callback run on every invalidation.

    Returns:
        A function that unregisters the callback
    """
    with _lock:
        _callbacks.append(callback)

    def unregister() -> None:
        with _lock:
            if callback in _callbacks:
                _callbacks.remove(callback)

    return unregister


def invalidate_caches() -> None:
    """Clear cached paths and run every invalidation callback.

    A failing callback is logged and skipped; the rest still run.
    """
    with _lock:
        _cache.clear()
        callbacks = list(_callbacks)

    for callback in callbacks:
        try:
            callback()
        except Exception as e:
            log.warn("cache invalidation callback failed", {"error": format_error(e)})
            log.debug("callback traceback", {"traceback": format_unknown_error(e)})
