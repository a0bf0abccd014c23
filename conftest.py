import pytest
from django.core.cache import cache

from infrastructure.container import container


@pytest.fixture(autouse=True)
def isolated_state():
    """Fresh throttle counters and service instances for every test."""
    cache.clear()
    container.reset()
    yield
    container.reset()
