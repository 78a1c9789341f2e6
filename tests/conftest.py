from collections.abc import Iterator

import pytest

from tableconf.container import default_container
from tableconf.registry import PropertyRegistry, build_registry


@pytest.fixture
def registry() -> PropertyRegistry:
    return build_registry()


@pytest.fixture(autouse=True)
def reset_container_overrides() -> Iterator[None]:
    """Drop any provider overrides a test placed on the shared container."""
    yield
    default_container().reset_override()
