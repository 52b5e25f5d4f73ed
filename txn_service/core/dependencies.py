"""
FastAPI dependency injection utilities.

Provides the transaction store held by the application and the
service built on top of it.
"""

from typing import Annotated

from fastapi import Depends, Request

from txn_service.persistence.base import TransactionStore
from txn_service.services.transaction_service import TransactionService


def get_store(request: Request) -> TransactionStore:
    """Return the store the application was created with."""
    return request.app.state.store


Store = Annotated[TransactionStore, Depends(get_store)]


def get_transaction_service(store: Store) -> TransactionService:
    """Build a TransactionService over the application store."""
    return TransactionService(store)


TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
