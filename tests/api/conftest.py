"""API test fixtures — fresh app + store per test, served through httpx.

Invariants:
    - Every test gets its own seeded BookStore (no state bleeds between tests)
    - The store fixture is the same object the routes see, so tests can
      assert store state after a request

Design Decisions:
    - ASGITransport over a live server: no sockets, runs in-process
    - Fixed clock: created_at is deterministic and comparable in assertions
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from bookshelf.config import Settings
from bookshelf.core.book_store import BookStore
from bookshelf.main import create_app


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(fixed_now):
    return BookStore.with_default_seed(clock=lambda: fixed_now)


@pytest.fixture
def settings():
    return Settings(_env_file=None, app_name="bookshelf-test", app_version="9.9.9")


@pytest.fixture
def app(store, settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
