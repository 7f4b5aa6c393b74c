from collections.abc import Iterator

import pytest

from socketlib.env.rewire import reset_env
from socketlib.paths.rewire import reset_paths
from socketlib.util.log import Log


@pytest.fixture(autouse=True)
def _rewire_teardown() -> Iterator[None]:
    yield
    reset_env()
    reset_paths()


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
