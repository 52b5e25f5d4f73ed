"""In-memory transaction store."""

from __future__ import annotations

import itertools
import threading
import time
from collections.abc import Iterable

from txn_service.core.config import StoreConfig
from txn_service.core.logging import LoggerMixin
from txn_service.domain.models.transaction import Transaction
from txn_service.persistence.base import TransactionStore


def seed_transactions(now: int | None = None) -> list[Transaction]:
    """Build the records a fresh store starts with."""
    if now is None:
        now = int(time.time())
    return [
        Transaction(
            id=1,
            user_id=1,
            name="Buy iPhone 13",
            items=["iPhone 13", "Clear Case"],
            amount=10_000_000,
            created_at=now - 60 * 60,
        ),
        Transaction(
            id=2,
            user_id=0,
            name="Anonymous buy T-Shirts",
            items=["T-Shirt Bugs Bunny White Colour", "T-Shirt Tweety Sun Colour"],
            amount=200_000,
            created_at=now - 30 * 60,
        ),
    ]


class InMemoryTransactionStore(TransactionStore, LoggerMixin):
    """Dict-backed store for the lifetime of the process.

    IDs come from a counter that starts after the highest preloaded ID, so
    they never repeat regardless of how many records the store holds.
    """

    def __init__(self, records: Iterable[Transaction] = ()) -> None:
        self._lock = threading.Lock()
        self._records: dict[int, Transaction] = {}
        for record in records:
            if record.id in self._records:
                raise ValueError(f"Duplicate transaction ID: {record.id}")
            self._records[record.id] = record
        self._ids = itertools.count(max(self._records, default=0) + 1)

    @classmethod
    def seeded(cls, now: int | None = None) -> InMemoryTransactionStore:
        """Create a store holding the seed transactions."""
        return cls(seed_transactions(now))

    def list(self) -> list[Transaction]:
        with self._lock:
            return list(self._records.values())

    def get(self, transaction_id: int) -> Transaction | None:
        with self._lock:
            return self._records.get(transaction_id)

    def insert(self, record: Transaction) -> Transaction:
        with self._lock:
            stored = record.model_copy(
                update={"id": next(self._ids), "created_at": int(time.time())}
            )
            self._records[stored.id] = stored
        self.logger.debug("Transaction stored", transaction_id=stored.id)
        return stored

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def create_store(config: StoreConfig) -> TransactionStore:
    """Create the store configured for this process."""
    if config.seed_data:
        return InMemoryTransactionStore.seeded()
    return InMemoryTransactionStore()
