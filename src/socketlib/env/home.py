"""Home directory variable."""

from typing import Optional

from .rewire import get_env_value


def get_home() -> Optional[str]:
    return get_env_value("HOME")
