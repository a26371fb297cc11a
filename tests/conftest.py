"""
Global pytest configuration and fixtures.

Every test gets its own in-memory database so tests never share rows.
"""

import pytest

from railsafar.store import Store
from railsafar.service import RailwayService


@pytest.fixture
def store():
    """Seeded in-memory store"""
    store = Store("sqlite://", echo=False)
    store.initialize(seed=True)
    yield store
    store.close()


@pytest.fixture
def empty_store():
    """In-memory store with tables but no seed rows"""
    store = Store("sqlite://", echo=False)
    store.initialize(seed=False)
    yield store
    store.close()


@pytest.fixture
def service(store):
    return RailwayService(store)


@pytest.fixture
def passenger(service):
    """The seeded sample passenger"""
    return service.get_user_by_id("101").unwrap()


@pytest.fixture
def green_line(service):
    """Seeded train 3UP, which has no bookings"""
    return service.get_train_by_number("3UP").unwrap()
