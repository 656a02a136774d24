import random

import pytest
from fastapi.testclient import TestClient

from apps.api.main import create_app
from apps.api.memory.store import MemStorage


class BrokenDetailsStore(MemStorage):
    """Fails while persisting the second day plan."""

    def create_trip_detail(self, data):
        if data["day"] == 2:
            raise RuntimeError("disk full")
        return super().create_trip_detail(data)


@pytest.fixture
def store():
    return MemStorage(seed=True)


@pytest.fixture
def broken_store():
    return BrokenDetailsStore(seed=False)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def client(store, rng):
    return TestClient(create_app(store=store, rng=rng))
