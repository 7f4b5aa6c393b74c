"""PATH variable."""

from typing import Optional

from .rewire import get_env_value


def get_path() -> Optional[str]:
    return get_env_value("PATH")
