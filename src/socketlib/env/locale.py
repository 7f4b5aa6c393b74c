"""Locale variables."""

from typing import Optional

from .rewire import get_env_value


def get_lang() -> Optional[str]:
    return get_env_value("LANG")


def get_lc_all() -> Optional[str]:
    return get_env_value("LC_ALL")


def get_lc_messages() -> Optional[str]:
    return get_env_value("LC_MESSAGES")
