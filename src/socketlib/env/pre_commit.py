"""pre-commit hook detection."""

from .helpers import env_as_boolean
from .rewire import get_env_value


def get_pre_commit() -> bool:
    """Whether PRE_COMMIT is set (presence semantics)."""
    return env_as_boolean(get_env_value("PRE_COMMIT"))
