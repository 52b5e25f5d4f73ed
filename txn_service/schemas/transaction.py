"""Request schemas for transactions."""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
)

from txn_service.domain.models.transaction import ANONYMOUS_USER_ID, INT64_MAX, INT64_MIN

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class TransactionCreate(BaseModel):
    """Payload for recording a transaction.

    Every field is optional and falls back to its zero value, also when sent
    as null. Unknown keys, including ``id`` and ``created_at``, are ignored
    since both are assigned by the server.
    """

    user_id: Int64 = Field(default=ANONYMOUS_USER_ID, description="Owner, 0 for anonymous")
    name: StrictStr = Field(default="")
    items: list[StrictStr] | None = Field(default=None, description="Purchased items, in order")
    amount: Int64 = Field(default=0)

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "user_id": 7,
                "name": "Buy headphones",
                "items": ["Wireless Headphones"],
                "amount": 1500000,
            }
        },
    )

    @field_validator("user_id", "name", "amount", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default
        return v
