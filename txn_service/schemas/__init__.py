"""Schemas package for request/response models."""

from txn_service.schemas.envelope import Envelope
from txn_service.schemas.transaction import TransactionCreate

__all__ = [
    "Envelope",
    "TransactionCreate",
]
