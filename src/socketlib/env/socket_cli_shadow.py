"""Variables read by the Socket CLI package-manager shadow."""

from typing import Optional

from .helpers import env_as_boolean
from .rewire import get_env_value


def get_socket_cli_shadow_accept_risks() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_SHADOW_ACCEPT_RISKS"))


def get_socket_cli_shadow_api_token() -> Optional[str]:
    return get_env_value("SOCKET_CLI_SHADOW_API_TOKEN")


def get_socket_cli_shadow_bin() -> Optional[str]:
    return get_env_value("SOCKET_CLI_SHADOW_BIN")


def get_socket_cli_shadow_progress() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_SHADOW_PROGRESS"))


def get_socket_cli_shadow_silent() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_SHADOW_SILENT"))
