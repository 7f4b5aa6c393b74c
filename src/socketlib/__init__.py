"""socketlib - shared utilities for Socket CLI tooling.

Environment variable access with test-time rewiring, Socket directory
resolution and structured logging.
"""

__version__ = "0.1.0"

from .env.rewire import clear_env, get_env_value, has_override, reset_env, set_env, with_env
from .util.log import Log

__all__ = [
    "Log",
    "clear_env",
    "get_env_value",
    "has_override",
    "reset_env",
    "set_env",
    "with_env",
]
