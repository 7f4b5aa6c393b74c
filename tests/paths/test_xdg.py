from __future__ import annotations

import platformdirs

from socketlib.env.rewire import set_env
from socketlib.paths.socket import normalize_path
from socketlib.paths.xdg import get_xdg_cache_dir, get_xdg_config_dir, get_xdg_data_dir


def test_rewired_xdg_vars_win() -> None:
    set_env("XDG_CACHE_HOME", "/x/cache")
    set_env("XDG_CONFIG_HOME", "/x/config")
    set_env("XDG_DATA_HOME", "/x/data/")
    assert get_xdg_cache_dir() == "/x/cache"
    assert get_xdg_config_dir() == "/x/config"
    assert get_xdg_data_dir() == "/x/data"


def test_falls_back_to_platformdirs(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr("socketlib.paths.xdg.user_cache_dir", lambda: "/platform/cache")
    for key in ("XDG_CACHE_HOME", "XDG_CONFIG_HOME", "XDG_DATA_HOME"):
        set_env(key, None)

    assert get_xdg_cache_dir() == "/platform/cache"
    assert get_xdg_config_dir() == normalize_path(platformdirs.user_config_dir())
    assert get_xdg_data_dir() == normalize_path(platformdirs.user_data_dir())


def test_empty_xdg_var_falls_back(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr("socketlib.paths.xdg.user_cache_dir", lambda: "/platform/cache")
    set_env("XDG_CACHE_HOME", "")
    assert get_xdg_cache_dir() == "/platform/cache"
