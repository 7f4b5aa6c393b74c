"""Environment variable access with test-time rewiring.

Getters live in one module per variable family (``socketlib.env.ci``,
``socketlib.env.github``, ...). The rewiring API is re-exported here.
"""

from .helpers import env_as_boolean, env_as_number, env_as_string
from .rewire import (
    EnvRewire,
    Override,
    clear_env,
    get_env_value,
    has_override,
    reset_env,
    run_with_env,
    set_env,
    with_env,
)

__all__ = [
    "EnvRewire",
    "Override",
    "clear_env",
    "env_as_boolean",
    "env_as_number",
    "env_as_string",
    "get_env_value",
    "has_override",
    "reset_env",
    "run_with_env",
    "set_env",
    "with_env",
]
