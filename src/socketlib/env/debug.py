"""DEBUG namespace filter variable."""

from typing import Optional

from .rewire import get_env_value


def get_debug() -> Optional[str]:
    return get_env_value("DEBUG")
