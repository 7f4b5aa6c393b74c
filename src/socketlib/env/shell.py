"""SHELL variable."""

from typing import Optional

from .rewire import get_env_value


def get_shell() -> Optional[str]:
    return get_env_value("SHELL")
