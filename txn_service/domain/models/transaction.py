"""Transaction domain model."""

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ANONYMOUS_USER_ID = 0


class Transaction(BaseModel):
    """A recorded purchase.

    ``id`` is assigned by the store and never serialized. ``created_at`` is a
    unix timestamp in seconds and is left out of the output while unset.
    """

    id: int = Field(default=0, exclude=True)
    user_id: int = Field(default=ANONYMOUS_USER_ID, description="Owner, 0 for anonymous")
    name: str = Field(default="")
    items: list[str] = Field(default_factory=list)
    amount: int = Field(default=0)
    created_at: int = Field(default=0, description="Unix timestamp (seconds)")

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="wrap")
    def _omit_unset_created_at(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if not data.get("created_at"):
            data.pop("created_at", None)
        return data

    @property
    def is_anonymous(self) -> bool:
        return self.user_id == ANONYMOUS_USER_ID
