"""Socket configuration variables (``SOCKET_*``)."""

from typing import Optional, Union

from .helpers import env_as_boolean, env_as_number
from .rewire import get_env_value


def get_socket_accept_risks() -> bool:
    return env_as_boolean(get_env_value("SOCKET_ACCEPT_RISKS"))


def get_socket_api_base_url() -> Optional[str]:
    return get_env_value("SOCKET_API_BASE_URL")


def get_socket_api_proxy() -> Optional[str]:
    return get_env_value("SOCKET_API_PROXY")


def get_socket_api_timeout() -> Union[int, float]:
    """API request timeout in milliseconds; 0 when unset or invalid."""
    return env_as_number(get_env_value("SOCKET_API_TIMEOUT"))


def get_socket_api_token() -> Optional[str]:
    return get_env_value("SOCKET_API_TOKEN")


def get_socket_cacache_dir() -> Optional[str]:
    return get_env_value("SOCKET_CACACHE_DIR")


def get_socket_config() -> Optional[str]:
    return get_env_value("SOCKET_CONFIG")


def get_socket_debug() -> Optional[str]:
    return get_env_value("SOCKET_DEBUG")


def get_socket_dlx_dir_env() -> Optional[str]:
    return get_env_value("SOCKET_DLX_DIR")


def get_socket_home() -> Optional[str]:
    """Overrides the default ``~/.socket`` user directory."""
    return get_env_value("SOCKET_HOME")


def get_socket_no_api_token() -> bool:
    return env_as_boolean(get_env_value("SOCKET_NO_API_TOKEN"))


def get_socket_npm_registry() -> Optional[str]:
    return get_env_value("SOCKET_NPM_REGISTRY")


def get_socket_org_slug() -> Optional[str]:
    return get_env_value("SOCKET_ORG_SLUG")


def get_socket_registry_url() -> Optional[str]:
    return get_env_value("SOCKET_REGISTRY_URL")


def get_socket_view_all_risks() -> bool:
    return env_as_boolean(get_env_value("SOCKET_VIEW_ALL_RISKS"))
