"""Core dependencies for FastAPI application."""

from collections.abc import AsyncGenerator
from typing import Annotated

import structlog
from fastapi import Depends, Request

from .config import Settings
from .exceptions import ConfigurationError
from .riot_api import RiotAPIClient

logger = structlog.get_logger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


async def get_riot_client(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AsyncGenerator[RiotAPIClient, None]:
    """Get a per-request Riot API client instance."""
    if not settings.riot_api_key_loaded:
        logger.error("Riot API key not configured")
        raise ConfigurationError(
            "Riot API key not configured",
            service="RiotAPIClient",
            operation="start_session",
        )

    client = RiotAPIClient(settings.riot_api_config())
    await client.start_session()
    try:
        yield client
    finally:
        await client.close()


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RiotClientDep = Annotated[RiotAPIClient, Depends(get_riot_client)]

__all__ = ["get_app_settings", "get_riot_client", "SettingsDep", "RiotClientDep"]
