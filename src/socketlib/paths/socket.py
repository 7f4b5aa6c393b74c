"""Socket user, app and cache directory resolution.

Directories are computed from the rewired env getters and cached through
``paths.rewire``; call ``reset_paths()`` after changing env overrides that
feed into a cached directory.
"""

import posixpath
import tempfile
from pathlib import Path

from ..env.home import get_home
from ..env.socket import get_socket_cacache_dir as get_socket_cacache_dir_env
from ..env.socket import get_socket_dlx_dir_env, get_socket_home
from ..env.windows import get_userprofile
from ..util.log import Log
from .dirnames import (
    CACHE_DIR,
    CACHE_GITHUB_DIR,
    CACHE_TTL_DIR,
    DOT_SOCKET_DIR,
    SOCKET_APP_PREFIX,
    SOCKET_CLI_APP_NAME,
    SOCKET_DLX_APP_NAME,
    SOCKET_REGISTRY_APP_NAME,
)
from .rewire import get_path_value

log = Log.create({"service": "paths.socket"})


def normalize_path(path: str) -> str:
    """Use forward slashes and collapse redundant separators and dot segments."""
    if not path:
        return path
    return posixpath.normpath(path.replace("\\", "/"))


def _join(*parts: str) -> str:
    return normalize_path(posixpath.join(*(p.replace("\\", "/") for p in parts)))


def get_os_home_dir() -> str:
    return get_path_value("homedir", lambda: str(Path.home())) or ""


def get_os_tmp_dir() -> str:
    return get_path_value("tmpdir", tempfile.gettempdir) or ""


def get_user_home_dir() -> str:
    """Resolve the user's home directory.

    Tries HOME, then USERPROFILE, then the OS lookup, and finally falls back
    to the temp directory.
    """
    home = get_home()
    if home:
        return home
    profile = get_userprofile()
    if profile:
        return profile
    try:
        os_home = get_os_home_dir()
    except Exception as e:
        # Path.home() raises when no home can be determined; treat as absent.
        log.debug("os home lookup failed", {"error": e})
        os_home = ""
    if os_home:
        return os_home
    return get_os_tmp_dir()


def get_socket_user_dir() -> str:
    """``$SOCKET_HOME`` or ``~/.socket``."""
    def compute() -> str:
        socket_home = get_socket_home()
        if socket_home:
            return normalize_path(socket_home)
        return _join(get_user_home_dir(), DOT_SOCKET_DIR)

    return get_path_value("socket-user-dir", compute) or ""


def get_socket_home_path() -> str:
    """Alias for get_socket_user_dir()."""
    return get_socket_user_dir()


def get_socket_app_dir(app_name: str) -> str:
    return _join(get_socket_user_dir(), f"{SOCKET_APP_PREFIX}{app_name}")


def get_socket_cacache_dir() -> str:
    def compute() -> str:
        env_dir = get_socket_cacache_dir_env()
        if env_dir:
            return normalize_path(env_dir)
        return _join(get_socket_user_dir(), f"{SOCKET_APP_PREFIX}cacache")

    return get_path_value("socket-cacache-dir", compute) or ""


def get_socket_dlx_dir() -> str:
    def compute() -> str:
        env_dir = get_socket_dlx_dir_env()
        if env_dir:
            return normalize_path(env_dir)
        return _join(get_socket_user_dir(), f"{SOCKET_APP_PREFIX}{SOCKET_DLX_APP_NAME}")

    return get_path_value("socket-dlx-dir", compute) or ""


def get_socket_app_cache_dir(app_name: str) -> str:
    return _join(get_socket_app_dir(app_name), CACHE_DIR)


def get_socket_app_cache_ttl_dir(app_name: str) -> str:
    return _join(get_socket_app_cache_dir(app_name), CACHE_TTL_DIR)


def get_socket_cli_dir() -> str:
    return get_socket_app_dir(SOCKET_CLI_APP_NAME)


def get_socket_registry_dir() -> str:
    return get_socket_app_dir(SOCKET_REGISTRY_APP_NAME)


def get_socket_registry_github_cache_dir() -> str:
    return _join(get_socket_app_cache_ttl_dir(SOCKET_REGISTRY_APP_NAME), CACHE_GITHUB_DIR)
