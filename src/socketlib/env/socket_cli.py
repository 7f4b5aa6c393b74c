"""Socket CLI variables (``SOCKET_CLI_*``).

Several settings accept legacy or generic aliases. For those the first
variable with a non-empty value wins.
"""

from typing import Optional, Union

from .helpers import env_as_boolean, env_as_number
from .rewire import get_env_value


def _first(*keys: str) -> Optional[str]:
    for key in keys:
        value = get_env_value(key)
        if value:
            return value
    return None


def get_socket_cli_accept_risks() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_ACCEPT_RISKS"))


def get_socket_cli_api_base_url() -> Optional[str]:
    return _first("SOCKET_CLI_API_BASE_URL", "SOCKET_SECURITY_API_BASE_URL")


def get_socket_cli_api_proxy() -> Optional[str]:
    """Proxy for API requests, falling back to the standard proxy variables."""
    return _first(
        "SOCKET_CLI_API_PROXY",
        "SOCKET_SECURITY_API_PROXY",
        "HTTPS_PROXY",
        "https_proxy",
        "HTTP_PROXY",
        "http_proxy",
    )


def get_socket_cli_api_timeout() -> Union[int, float]:
    return env_as_number(get_env_value("SOCKET_CLI_API_TIMEOUT"))


def get_socket_cli_api_token() -> Optional[str]:
    return _first(
        "SOCKET_CLI_API_TOKEN",
        "SOCKET_CLI_API_KEY",
        "SOCKET_SECURITY_API_TOKEN",
        "SOCKET_SECURITY_API_KEY",
    )


def get_socket_cli_config() -> Optional[str]:
    return get_env_value("SOCKET_CLI_CONFIG")


def get_socket_cli_fix() -> Optional[str]:
    return get_env_value("SOCKET_CLI_FIX")


def get_socket_cli_no_api_token() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_NO_API_TOKEN"))


def get_socket_cli_optimize() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_OPTIMIZE"))


def get_socket_cli_org_slug() -> Optional[str]:
    return _first("SOCKET_CLI_ORG_SLUG", "SOCKET_ORG_SLUG")


def get_socket_cli_view_all_risks() -> bool:
    return env_as_boolean(get_env_value("SOCKET_CLI_VIEW_ALL_RISKS"))


def get_socket_cli_github_token() -> Optional[str]:
    return _first("SOCKET_CLI_GITHUB_TOKEN", "SOCKET_SECURITY_GITHUB_PAT", "GITHUB_TOKEN")


def get_socket_cli_bootstrap_spec() -> Optional[str]:
    return get_env_value("SOCKET_CLI_BOOTSTRAP_SPEC")


def get_socket_cli_bootstrap_cache_dir() -> Optional[str]:
    return get_env_value("SOCKET_CLI_BOOTSTRAP_CACHE_DIR")
