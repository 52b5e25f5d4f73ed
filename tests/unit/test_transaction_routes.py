"""Unit tests for transaction routes."""

import pytest
from starlette.requests import Request

from txn_service.api.routes.transactions import (
    TRUE_LITERALS,
    first_query_value,
    parse_flag,
    router,
)


def make_request(query_string: bytes) -> Request:
    return Request({"type": "http", "method": "POST", "query_string": query_string, "headers": []})


class TestParseFlag:
    """Test parse_flag."""

    @pytest.mark.parametrize("value", sorted(TRUE_LITERALS))
    def test_true_literals(self, value):
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", [None, "", "0", "f", "false", "yes", "on", "tRUE", " true"])
    def test_everything_else_is_false(self, value):
        assert parse_flag(value) is False


class TestFirstQueryValue:
    """Test first_query_value."""

    @pytest.mark.parametrize(
        ("query_string", "expected"),
        [
            (b"anonymous=true", "true"),
            (b"anonymous=true&anonymous=false", "true"),
            (b"anonymous=false&anonymous=true", "false"),
            (b"anonymous=", ""),
            (b"other=1", None),
            (b"", None),
        ],
    )
    def test_first_value_wins(self, query_string, expected):
        assert first_query_value(make_request(query_string), "anonymous") == expected


class TestTransactionRouter:
    """Test transaction router configuration."""

    def test_routes_registered(self):
        """Test list, create and get routes exist."""
        routes = {(r.path, tuple(sorted(r.methods))) for r in router.routes}
        assert routes == {
            ("/transactions", ("GET",)),
            ("/transactions", ("POST",)),
            ("/transactions/{transaction_id}", ("GET",)),
        }

    def test_routes_have_summaries(self):
        """Test every route is documented."""
        for route in router.routes:
            assert route.summary
            assert "Transactions" in route.tags
