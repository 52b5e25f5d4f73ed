"""Transaction Log Service.

This service records purchase transactions in memory and serves them over
JSON-over-HTTP, logging the processing time of every request.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from starlette.exceptions import HTTPException as StarletteHTTPException

from txn_service.api.middleware import RequestLoggingMiddleware
from txn_service.api.responses import fail_response
from txn_service.api.routes import api_router
from txn_service.core.config import AppEnvironment, Settings, get_settings
from txn_service.core.errors import TransactionServiceError, get_status_code
from txn_service.core.logging import setup_logging
from txn_service.persistence.base import TransactionStore
from txn_service.persistence.transaction_store import create_store

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    settings: Settings = app.state.settings

    setup_logging(settings)

    logger.info(
        "Starting Transaction Log Service",
        extra={
            "app": settings.app.name,
            "env": settings.app.env,
            "version": settings.app.version,
        },
    )
    logger.info(f"server running on port {settings.server.port}")

    yield

    logger.info("Transaction Log Service stopped")


def create_app(store: TransactionStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Transaction store to serve; built from settings when omitted
    """
    settings = get_settings()

    app = FastAPI(
        title="Transaction Log API",
        description="Record and query purchase transactions held in memory.",
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.env != AppEnvironment.PROD else None,
        redoc_url="/redoc" if settings.app.env != AppEnvironment.PROD else None,
        openapi_url="/openapi.json" if settings.app.env != AppEnvironment.PROD else None,
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_store(settings.store)

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router)

    setup_telemetry(app, settings)

    @app.exception_handler(TransactionServiceError)
    async def domain_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: TransactionServiceError
    ) -> JSONResponse:
        """Turn domain errors into failure envelopes."""
        return fail_response(exc.message, get_status_code(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework errors such as unknown routes in failure envelopes."""
        return fail_response(str(exc.detail), exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions and return 500 error responses."""
        logger.exception(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
        )
        return fail_response(INTERNAL_ERROR_MESSAGE, 500)

    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Setup OpenTelemetry instrumentation."""
    if not settings.observability.otlp_endpoint:
        return

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.observability.service_name,
        }
    )

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.observability.otlp_endpoint,
        insecure=settings.observability.otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "txn_service.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.env == AppEnvironment.LOCAL,
        workers=1 if settings.app.env == AppEnvironment.LOCAL else settings.server.workers,
        timeout_keep_alive=settings.server.read_timeout,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()
