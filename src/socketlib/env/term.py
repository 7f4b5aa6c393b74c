"""TERM variable."""

from typing import Optional

from .rewire import get_env_value


def get_term() -> Optional[str]:
    return get_env_value("TERM")
