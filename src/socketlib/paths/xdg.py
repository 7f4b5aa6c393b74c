"""XDG base directories.

The rewired ``XDG_*_HOME`` variables take precedence; otherwise the platform
default from platformdirs is used. platformdirs reads ``os.environ`` itself,
so the env variable is checked here first to keep overrides effective.
"""

from platformdirs import user_cache_dir, user_config_dir, user_data_dir

from ..env.xdg import get_xdg_cache_home, get_xdg_config_home, get_xdg_data_home
from .socket import normalize_path


def get_xdg_cache_dir() -> str:
    return normalize_path(get_xdg_cache_home() or user_cache_dir())


def get_xdg_config_dir() -> str:
    return normalize_path(get_xdg_config_home() or user_config_dir())


def get_xdg_data_dir() -> str:
    return normalize_path(get_xdg_data_home() or user_data_dir())
