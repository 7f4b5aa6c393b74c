"""npm configuration and lifecycle variables."""

from typing import Optional

from .rewire import get_env_value


def get_npm_config_registry() -> Optional[str]:
    return get_env_value("npm_config_registry")


def get_npm_config_user_agent() -> Optional[str]:
    """User agent of the package manager running the current script."""
    return get_env_value("npm_config_user_agent")


def get_npm_lifecycle_event() -> Optional[str]:
    """Name of the running package.json script, e.g. "test"."""
    return get_env_value("npm_lifecycle_event")


def get_npm_registry() -> Optional[str]:
    return get_env_value("NPM_REGISTRY")


def get_npm_token() -> Optional[str]:
    return get_env_value("NPM_TOKEN")
