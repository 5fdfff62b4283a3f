"""
Shared fixtures for the SpaceAPI test suite.
"""

import pytest
from django.core.cache import cache

from config.utils import update_option
from spaceapi.apps import get_registry
from spaceapi.registry import DEFAULT_OPTIONS, OptionRegistry


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def registry():
    return get_registry()


@pytest.fixture
def memory_store():
    return {}


@pytest.fixture
def memory_registry(memory_store):
    """Registry reading from a plain dict instead of the database."""
    return OptionRegistry("test-section", DEFAULT_OPTIONS, reader=memory_store.get)


@pytest.fixture
def store_options(db, registry):
    """Write ``key=value`` pairs under the registry storage names."""
    def _store(**values):
        for key, value in values.items():
            update_option(registry.storage_name(key), value)
    return _store
