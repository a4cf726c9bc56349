import pytest

from styleshop.store import store


@pytest.fixture(autouse=True)
def reset_store():
    """Every test starts from the seeded catalog with an empty cart and no orders."""
    store.reset()
    yield
    store.reset()
