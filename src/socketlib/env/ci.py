"""CI environment detection."""

from .helpers import env_as_boolean
from .rewire import get_env_value


def get_ci() -> bool:
    """Whether CI is set.

    Presence is what counts: ``CI=false`` still reports True.
    """
    return env_as_boolean(get_env_value("CI"))
