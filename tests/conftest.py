import pytest

from parboot import loop


@pytest.fixture(autouse=True)
def no_backend():
    """Each test starts and ends with no loop backend registered."""
    loop.unregister()
    yield
    loop.unregister()
