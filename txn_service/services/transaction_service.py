"""Transaction service for listing, recording and fetching transactions."""

import logging
import re

from pydantic import ValidationError

from txn_service.core.errors import BadRequestError, NotFoundError
from txn_service.domain.models.transaction import (
    ANONYMOUS_USER_ID,
    INT64_MAX,
    INT64_MIN,
    Transaction,
)
from txn_service.persistence.base import TransactionStore
from txn_service.schemas.transaction import TransactionCreate

logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = "fail decode request body"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_transaction_id(raw_id: str) -> int:
    """Parse a base-10 signed 64-bit transaction ID.

    Raises:
        ValueError: If the value is not an integer literal or is out of range
    """
    if not _INTEGER_PATTERN.fullmatch(raw_id):
        raise ValueError(f"not an integer: {raw_id!r}")
    value = int(raw_id)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"out of range: {raw_id!r}")
    return value


class TransactionService:
    """Service for transaction operations."""

    def __init__(self, store: TransactionStore):
        self.store = store

    def decode_payload(self, body: bytes) -> TransactionCreate:
        """Decode a raw request body into a create payload.

        Raises:
            BadRequestError: If the body is not a JSON object of the expected shape
        """
        try:
            return TransactionCreate.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                DECODE_ERROR_MESSAGE,
                extra={
                    "error": [
                        {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
                        for err in e.errors()
                    ]
                },
            )
            raise BadRequestError(DECODE_ERROR_MESSAGE) from None

    def list_transactions(self) -> list[Transaction]:
        """Return every stored transaction."""
        return self.store.list()

    def get_transaction(self, raw_id: str) -> Transaction:
        """Get a transaction by its ID as it appeared in the request path.

        Raises:
            BadRequestError: If the ID is not an integer
            NotFoundError: If no transaction has that ID
        """
        try:
            transaction_id = parse_transaction_id(raw_id)
        except ValueError:
            logger.error("invalid transaction id", extra={"transaction_id": raw_id})
            raise BadRequestError(
                "invalid transaction id", details={"transaction_id": raw_id}
            ) from None

        transaction = self.store.get(transaction_id)
        if transaction is None:
            logger.warning("transaction not found", extra={"transaction_id": transaction_id})
            raise NotFoundError("transaction not found", details={"transaction_id": transaction_id})

        return transaction

    def create_transaction(self, payload: TransactionCreate, anonymous: bool = False) -> Transaction:
        """Record a new transaction.

        A transaction without a user ID is only accepted when the caller
        marks it as anonymous. ID and creation time are assigned by the store.

        Raises:
            BadRequestError: If the user ID is missing on a non-anonymous transaction
        """
        if not anonymous and payload.user_id == ANONYMOUS_USER_ID:
            logger.error(
                "transaction has empty user ID",
                extra={"payload": payload.model_dump()},
            )
            raise BadRequestError("must provide user ID")

        transaction = self.store.insert(
            Transaction(
                user_id=payload.user_id,
                name=payload.name,
                items=list(payload.items or []),
                amount=payload.amount,
            )
        )

        logger.info(
            "Transaction created",
            extra={
                "transaction_id": transaction.id,
                "user_id": transaction.user_id,
                "anonymous": transaction.is_anonymous,
            },
        )
        return transaction
