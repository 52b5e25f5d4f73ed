"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing the app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OTEL_LOG_RECORD_FORMAT", "json")

from txn_service.domain.models.transaction import Transaction
from txn_service.persistence.transaction_store import InMemoryTransactionStore
from txn_service.schemas.transaction import TransactionCreate

# Fixed clock for seeded records
SEED_NOW = 1_700_000_000


@pytest.fixture
def seeded_store() -> InMemoryTransactionStore:
    """Store holding the two seed transactions."""
    return InMemoryTransactionStore.seeded(now=SEED_NOW)


@pytest.fixture
def empty_store() -> InMemoryTransactionStore:
    """Store without any transactions."""
    return InMemoryTransactionStore()


@pytest.fixture
def sample_payload() -> TransactionCreate:
    """Sample create payload for a known user."""
    return TransactionCreate(
        user_id=42,
        name="Buy groceries",
        items=["Milk", "Bread"],
        amount=75_000,
    )


@pytest.fixture
def sample_transaction() -> Transaction:
    """Sample stored transaction."""
    return Transaction(
        id=10,
        user_id=42,
        name="Buy groceries",
        items=["Milk", "Bread"],
        amount=75_000,
        created_at=SEED_NOW,
    )
