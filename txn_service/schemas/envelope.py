"""Uniform response envelope."""

from typing import Any, Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Wrapper around every response body.

    ``data`` is only present on success and ``error_message`` only on failure.
    """

    ok: bool
    data: DataT | None = Field(default=None)
    error_message: str | None = Field(default=None)

    def to_content(self) -> dict[str, Any]:
        """Render the envelope as JSON-compatible content, dropping empty members."""
        content: dict[str, Any] = {"ok": self.ok}
        if self.data is not None:
            content["data"] = jsonable_encoder(self.data)
        if self.error_message:
            content["error_message"] = self.error_message
        return content
