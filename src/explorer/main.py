"""FastAPI application entry point for the Ledger Explorer gateway."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.explorer.api.exception_handlers import register_exception_handlers
from src.explorer.api.routers import api_router
from src.explorer.config import Settings, get_settings
from src.explorer.ledger.client import LedgerClient

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # httpx logs every request at INFO; the access middleware already does
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the shared ledger client.

    Uses the settings stored on ``app.state`` by :func:`create_app`. A
    client already placed on ``app.state`` (e.g. by tests) is used as is
    and left open on shutdown.
    """
    owned_client = None
    if getattr(app.state, "ledger_client", None) is None:
        settings = app.state.settings
        owned_client = LedgerClient.from_settings(settings)
        app.state.ledger_client = owned_client
        logger.info("Using ledger at %s", settings.ledger_url)

    yield

    if owned_client is not None:
        await owned_client.aclose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use. Defaults to :func:`get_settings`.

    Returns:
        The configured application.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Ledger Explorer",
        description="Read-only REST gateway over a remote ledger node",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Dependencies see the same settings as the app itself
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and elapsed time of every request."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.middleware("http")
    async def trim_trailing_slash(request: Request, call_next):
        """Route ``/accounts/`` like ``/accounts`` rather than redirecting."""
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    register_exception_handlers(app)

    @app.get(API_PREFIX, response_class=PlainTextResponse, tags=["health"])
    async def root_health_check() -> str:
        """Health check endpoint."""
        return "Welcome to the Ledger Explorer!"

    app.include_router(api_router, prefix=API_PREFIX)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


# Configure logging before the app is built so startup is logged too
configure_logging(get_settings())
app = create_app()
