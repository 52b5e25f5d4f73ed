"""Pytest configuration for API integration tests.

The app is driven in-process through httpx's ASGI transport, each test
getting a fresh seeded store.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI

from txn_service.main import create_app
from txn_service.persistence.transaction_store import InMemoryTransactionStore


@pytest.fixture
def client_app(seeded_store: InMemoryTransactionStore) -> FastAPI:
    """Create FastAPI app serving the seeded store."""
    return create_app(store=seeded_store)


@pytest.fixture
async def client(client_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the app."""
    transport = httpx.ASGITransport(app=client_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
