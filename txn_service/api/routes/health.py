"""Health check routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from txn_service.api.responses import success_response
from txn_service.schemas.envelope import Envelope

HEALTH_GREETING = "Berry nice!"

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=Envelope[str],
    summary="Health check",
    description="Check if the service is running. Not included in request logs.",
)
async def health_check() -> JSONResponse:
    """Return the service greeting."""
    return success_response(HEALTH_GREETING)
