"""
Riot API client package.

Provides an async HTTP client for the account-v1 and league-v4 endpoints
with status-based error classification.
"""

from .client import RiotAPIClient
from .constants import Platform, RankedQueue, Region, SERVER_PLATFORMS
from .endpoints import RiotAPIEndpoints
from .errors import (
    AuthenticationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)
from .models import AccountDTO, LeagueEntryDTO

__all__ = [
    "RiotAPIClient",
    "RiotAPIEndpoints",
    "Platform",
    "RankedQueue",
    "Region",
    "SERVER_PLATFORMS",
    "RiotAPIError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "AccountDTO",
    "LeagueEntryDTO",
]
