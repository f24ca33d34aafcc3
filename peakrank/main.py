"""Main FastAPI application for the peakrank backend."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from peakrank import __version__
from peakrank.core import DatabaseManager, Settings, get_global_settings
from peakrank.core.exceptions import ServiceException, UpstreamFailure
from peakrank.core.logging import get_logger, setup_logging
from peakrank.features.accounts import accounts_router
from peakrank.features.ranks import ranks_router

logger = get_logger(__name__)


def _log_api_key_configuration(settings: Settings) -> None:
    """Log whether the Riot API key is loaded, never the key itself."""
    if not settings.riot_api_key_loaded:
        logger.warning(
            "RIOT_API_KEY not configured! /rank will fail until it is set.",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured (development key detected)")
        logger.warning("Development API keys expire every 24 hours!")
    else:
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting up peakrank backend")
    _log_api_key_configuration(settings)

    db_manager = DatabaseManager(settings.database_url, echo=settings.debug)
    await db_manager.init_db()
    app.state.db_manager = db_manager
    yield
    logger.info("Shutting down peakrank backend")
    await db_manager.close()


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    """Convert any service exception into its JSON error envelope."""
    if exc.status_code >= 500 and not isinstance(exc, UpstreamFailure):
        # Upstream failures are logged by the resolver with step and body
        logger.error(
            "Request failed",
            path=request.url.path,
            error_type=exc.__class__.__name__,
            error_message=exc.message,
        )
    elif exc.status_code < 500:
        logger.info(
            "Request rejected",
            path=request.url.path,
            error_message=exc.message,
            error_context=exc.context,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies and query params with a 400 envelope."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info("Invalid request", path=request.url.path, problems=problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": f"Invalid request: {problems}"},
    )


tags_metadata = [
    {
        "name": "accounts",
        "description": "Stored player accounts with their reported peak rank.",
    },
    {
        "name": "ranks",
        "description": "Live solo-queue rank lookups through the Riot API.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for ``settings``."""
    settings = settings or get_global_settings()

    app = FastAPI(
        title="peakrank - Account & Rank Service",
        description="""
    Stores League of Legends accounts and resolves their current solo-queue
    rank through the Riot API.

    * **Accounts**: list, add and delete stored accounts
    * **Rank**: `GET /rank?riotId=name%23tag&server=euw`
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings

    app.add_exception_handler(ServiceException, service_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(accounts_router)
    app.include_router(ranks_router)

    @app.get("/", tags=["health"])
    async def root() -> Dict[str, Any]:
        """Liveness probe kept for existing clients."""
        return {"status": "Backend running"}

    @app.get("/health", tags=["health"])
    async def health_check() -> Dict[str, Any]:
        """
        Health check endpoint.

        Returns the application version, debug mode and whether a Riot API
        key is configured.
        """
        return {
            "status": "healthy",
            "version": __version__,
            "debug": settings.debug,
            "riot_api_key_loaded": settings.riot_api_key_loaded,
        }

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_global_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "peakrank.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


setup_logging(get_global_settings().log_level)
app = create_app()


if __name__ == "__main__":
    run()
