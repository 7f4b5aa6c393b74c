"""XDG base directory variables."""

from typing import Optional

from .rewire import get_env_value


def get_xdg_cache_home() -> Optional[str]:
    return get_env_value("XDG_CACHE_HOME")


def get_xdg_config_home() -> Optional[str]:
    return get_env_value("XDG_CONFIG_HOME")


def get_xdg_data_home() -> Optional[str]:
    return get_env_value("XDG_DATA_HOME")
