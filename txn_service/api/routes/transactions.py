"""Transaction API routes.

Endpoints:
- GET /transactions - List all transactions
- POST /transactions - Record a transaction
- GET /transactions/{transaction_id} - Get single transaction
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from txn_service.api.responses import success_response
from txn_service.core.dependencies import TransactionServiceDep
from txn_service.domain.models.transaction import Transaction
from txn_service.schemas.envelope import Envelope
from txn_service.schemas.transaction import TransactionCreate

router = APIRouter(prefix="/transactions", tags=["Transactions"])

TRUE_LITERALS = frozenset({"1", "t", "T", "true", "TRUE", "True"})

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": Envelope[None], "description": "Bad request"},
}

# Body and query are read by hand, so they are described here
CREATE_OPENAPI_EXTRA = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TransactionCreate.model_json_schema()}},
    },
    "parameters": [
        {
            "name": "anonymous",
            "in": "query",
            "required": False,
            "schema": {"type": "string"},
            "description": "Set to true to allow a transaction without user ID",
        }
    ],
}


def parse_flag(value: str | None) -> bool:
    """Interpret a query flag; anything but a true literal counts as false."""
    return value is not None and value in TRUE_LITERALS


def first_query_value(request: Request, name: str) -> str | None:
    """Return the first value of a query parameter, ignoring repeats."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.get(
    "",
    response_model=Envelope[list[Transaction]],
    summary="List transactions",
    description="Get every recorded transaction, in no particular order.",
)
async def list_transactions(service: TransactionServiceDep) -> JSONResponse:
    """List all transactions."""
    return success_response(service.list_transactions())


@router.post(
    "",
    response_model=Envelope[Transaction],
    summary="Record transaction",
    description="Record a transaction. Anonymous transactions need `anonymous=true`.",
    responses=ERROR_RESPONSES,
    openapi_extra=CREATE_OPENAPI_EXTRA,
)
async def create_transaction(request: Request, service: TransactionServiceDep) -> JSONResponse:
    """Record a transaction and return it with its creation time.

    The body is decoded as JSON whatever its Content-Type.
    """
    payload = service.decode_payload(await request.body())
    anonymous = parse_flag(first_query_value(request, "anonymous"))
    transaction = service.create_transaction(payload, anonymous=anonymous)
    return success_response(transaction)


@router.get(
    "/{transaction_id}",
    response_model=Envelope[Transaction],
    summary="Get transaction",
    description="Get a single transaction by its integer ID.",
    responses={
        **ERROR_RESPONSES,
        404: {"model": Envelope[None], "description": "Transaction not found"},
    },
)
async def get_transaction(transaction_id: str, service: TransactionServiceDep) -> JSONResponse:
    """Get transaction by ID."""
    return success_response(service.get_transaction(transaction_id))
