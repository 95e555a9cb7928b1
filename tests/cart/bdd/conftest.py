"""Shared BDD fixtures for the cart."""

import pytest
from storefront.backends.local_adapter import LocalBackend
from storefront.shop import Shop


@pytest.fixture()
def shop(store):
    return Shop(store, LocalBackend(store))


@pytest.fixture()
def catalog():
    """Product ids by name."""
    return {}


@pytest.fixture()
def error():
    """Container for captured failures."""
    return {"exc": None}
