"""Windows-specific directory variables."""

from typing import Optional

from .rewire import get_env_value


def get_appdata() -> Optional[str]:
    """Roaming application data directory."""
    return get_env_value("APPDATA")


def get_localappdata() -> Optional[str]:
    """Local (non-roaming) application data directory."""
    return get_env_value("LOCALAPPDATA")


def get_userprofile() -> Optional[str]:
    """User profile directory, the Windows counterpart of HOME."""
    return get_env_value("USERPROFILE")


def get_comspec() -> Optional[str]:
    """Path to the command interpreter, usually cmd.exe."""
    return get_env_value("COMSPEC")
