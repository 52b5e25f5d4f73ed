"""Local development server with auto-reload."""

import uvicorn

from txn_service.core.config import get_settings


def main() -> None:
    """Serve the app on the configured port, reloading on source changes."""
    settings = get_settings()

    uvicorn.run(
        "txn_service.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=True,
        reload_dirs=["txn_service"],
        log_level="debug",
    )
