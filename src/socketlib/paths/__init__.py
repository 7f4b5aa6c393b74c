"""Path helpers with test-time rewiring."""

from .rewire import (
    clear_path,
    get_path_value,
    has_override,
    invalidate_caches,
    register_cache_invalidation,
    reset_paths,
    set_path,
)

__all__ = [
    "clear_path",
    "get_path_value",
    "has_override",
    "invalidate_caches",
    "register_cache_invalidation",
    "reset_paths",
    "set_path",
]
