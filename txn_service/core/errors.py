"""
Domain-specific exceptions for the Transaction Log API.

These exceptions represent request failures and are mapped
to HTTP status codes and failure envelopes in the API layer.
"""

from typing import Any


class TransactionServiceError(Exception):
    """Base exception for all transaction service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(TransactionServiceError):
    """
    Raised when the request cannot be accepted as sent.

    Examples:
    - Malformed JSON body
    - Missing user ID on a non-anonymous transaction
    - Transaction ID that is not an integer

    HTTP Status: 400 Bad Request
    """

    pass


class NotFoundError(TransactionServiceError):
    """
    Raised when a requested transaction does not exist.

    HTTP Status: 404 Not Found
    """

    pass


ERROR_STATUS_MAP = {
    BadRequestError: 400,
    NotFoundError: 404,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
