"""NODE_ENV variable."""

from typing import Optional

from .rewire import get_env_value


def get_node_env() -> Optional[str]:
    return get_env_value("NODE_ENV")
