"""Root conftest — shared test configuration and the ASGI test client.

Invariants:
    - Default-message locale pinned to English regardless of the host env
    - Every client test gets a fresh worker pool, closed afterwards

Design Decisions:
    - ASGITransport does not run the lifespan, so the pool is started here
"""

import os

os.environ.setdefault("MESSAGE_LOCALE", "en")

import pytest
from httpx import ASGITransport, AsyncClient

from param_validation.infrastructure.worker_pool import (
    close_worker_pool,
    init_worker_pool,
)
from param_validation.main import app


@pytest.fixture
def worker_pool():
    pool = init_worker_pool(max_workers=2)
    yield pool
    close_worker_pool()


@pytest.fixture
async def client(worker_pool):
    """FastAPI test client with a live worker pool."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
