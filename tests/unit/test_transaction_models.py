"""Unit tests for transaction models and request schemas."""

import pytest
from pydantic import ValidationError

from txn_service.domain.models.transaction import INT64_MAX, Transaction
from txn_service.schemas.transaction import TransactionCreate


class TestTransaction:
    """Test Transaction domain model."""

    def test_id_is_never_serialized(self, sample_transaction):
        """Test the internal ID stays out of dumps."""
        data = sample_transaction.model_dump()
        assert "id" not in data
        assert sample_transaction.id == 10

    def test_serialized_fields(self, sample_transaction):
        """Test JSON output shape."""
        assert sample_transaction.model_dump(mode="json") == {
            "user_id": 42,
            "name": "Buy groceries",
            "items": ["Milk", "Bread"],
            "amount": 75_000,
            "created_at": 1_700_000_000,
        }

    def test_zero_created_at_omitted(self):
        """Test unset creation time is left out."""
        data = Transaction(user_id=1, name="Draft").model_dump()
        assert "created_at" not in data

    def test_is_frozen(self, sample_transaction):
        """Test stored records cannot be modified."""
        with pytest.raises(ValidationError):
            sample_transaction.amount = 1

    def test_is_anonymous(self):
        """Test anonymity follows the user ID."""
        assert Transaction(user_id=0).is_anonymous is True
        assert Transaction(user_id=3).is_anonymous is False


class TestTransactionCreate:
    """Test TransactionCreate schema."""

    def test_defaults_to_zero_values(self):
        """Test every field is optional."""
        payload = TransactionCreate()
        assert payload.user_id == 0
        assert payload.name == ""
        assert payload.items is None
        assert payload.amount == 0

    def test_ignores_server_assigned_fields(self):
        """Test id and created_at are dropped."""
        payload = TransactionCreate.model_validate(
            {"id": 5, "created_at": 1, "user_id": 2, "name": "x"}
        )
        assert "id" not in payload.model_dump()
        assert "created_at" not in payload.model_dump()

    def test_null_items_accepted(self):
        """Test items may be null."""
        assert TransactionCreate.model_validate({"items": None}).items is None

    def test_null_scalars_use_zero_values(self):
        """Test null user_id, name and amount fall back to their defaults."""
        payload = TransactionCreate.model_validate_json(
            b'{"user_id": 5, "name": null, "amount": null}'
        )

        assert payload.user_id == 5
        assert payload.name == ""
        assert payload.amount == 0

    def test_null_user_id_is_anonymous(self):
        assert TransactionCreate.model_validate({"user_id": None}).user_id == 0

    @pytest.mark.parametrize(
        "body",
        [
            {"user_id": "7"},
            {"user_id": 1.5},
            {"amount": "100"},
            {"name": 12},
            {"items": "Milk"},
            {"items": [1, 2]},
            {"amount": INT64_MAX + 1},
        ],
    )
    def test_strict_types(self, body):
        """Test mismatched types fail validation."""
        with pytest.raises(ValidationError):
            TransactionCreate.model_validate(body)
