"""Temporary directory variables."""

from typing import Optional

from .rewire import get_env_value


def get_tmpdir() -> Optional[str]:
    """Unix temp directory."""
    return get_env_value("TMPDIR")


def get_temp() -> Optional[str]:
    """Windows temp directory."""
    return get_env_value("TEMP")


def get_tmp() -> Optional[str]:
    return get_env_value("TMP")
