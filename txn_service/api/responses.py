"""Envelope-wrapped JSON responses."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from txn_service.schemas.envelope import Envelope


def success_response(data: Any) -> JSONResponse:
    """Wrap a handler result in a success envelope with HTTP 200."""
    envelope: Envelope[Any] = Envelope(ok=True, data=data)
    return JSONResponse(status_code=status.HTTP_200_OK, content=envelope.to_content())


def fail_response(
    message: str, status_code: int, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Wrap an error message in a failure envelope with the given status."""
    envelope: Envelope[Any] = Envelope(ok=False, error_message=message)
    return JSONResponse(status_code=status_code, content=envelope.to_content(), headers=headers)
