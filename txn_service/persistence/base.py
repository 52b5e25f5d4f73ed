"""Base classes for the storage layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from txn_service.domain.models.transaction import Transaction


class TransactionStore(ABC):
    """Storage capability the handlers depend on.

    Implementations own ID and timestamp assignment and must be safe to call
    from concurrent requests.
    """

    @abstractmethod
    def list(self) -> list[Transaction]:
        """Return a snapshot of all stored transactions, in no guaranteed order."""

    @abstractmethod
    def get(self, transaction_id: int) -> Transaction | None:
        """Return the transaction with the given ID, or None."""

    @abstractmethod
    def insert(self, record: Transaction) -> Transaction:
        """Store a new transaction and return it with its ID and creation time set."""
