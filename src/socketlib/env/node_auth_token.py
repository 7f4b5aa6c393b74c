"""Registry auth token used by setup-node and npm."""

from typing import Optional

from .rewire import get_env_value


def get_node_auth_token() -> Optional[str]:
    return get_env_value("NODE_AUTH_TOKEN")
