import pytest
from django.core.cache import cache

from .factories import create_configurable_product


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def product(db):
    return create_configurable_product()
