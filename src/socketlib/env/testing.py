"""Test runner detection."""

from .helpers import env_as_boolean, env_as_string
from .node_env import get_node_env
from .rewire import get_env_value


def get_jest_worker_id() -> str:
    return env_as_string(get_env_value("JEST_WORKER_ID"))


def get_vitest() -> bool:
    return env_as_boolean(get_env_value("VITEST"))


def get_pytest_current_test() -> str:
    """Node id of the running pytest test, or an empty string."""
    return env_as_string(get_env_value("PYTEST_CURRENT_TEST"))


def is_test() -> bool:
    """Whether the process looks like it is running under a test runner."""
    if env_as_string(get_node_env()) == "test":
        return True
    return get_vitest() or bool(get_jest_worker_id()) or bool(get_pytest_current_test())
