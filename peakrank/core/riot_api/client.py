"""Riot API HTTP client with error classification and bounded timeouts.

Every request is single-shot: a failure is raised to the caller right away
and never retried.
"""

import asyncio
from typing import Any, List, Optional, Union

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from peakrank.core.config import RiotAPIConfig
from .constants import Platform
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

logger = structlog.get_logger(__name__)

_STATUS_ERRORS = {
    400: (BadRequestError, "Invalid request parameters"),
    401: (AuthenticationError, "Invalid API key"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Resource not found"),
    429: (RateLimitError, "Rate limit exceeded"),
    503: (ServiceUnavailableError, "Service unavailable"),
}


class RiotAPIClient:
    """Riot API client for the account and league endpoints."""

    def __init__(
        self,
        config: RiotAPIConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            config: Immutable API key / region / timeout configuration
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        self.endpoints = RiotAPIEndpoints(config.region)
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "RiotAPIClient":
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "X-Riot-Token": self.config.api_key,
                        "Accept": "application/json",
                        "User-Agent": "peakrank-backend/1.0",
                    }

                    self.session = httpx.AsyncClient(
                        headers=headers,
                        timeout=httpx.Timeout(self.config.timeout),
                        transport=self._transport,
                    )

                    logger.debug(
                        "Riot API client session started",
                        region=self.config.region,
                        api_key_prefix="[REDACTED]" if self.config.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.debug("Riot API client session closed")

    @staticmethod
    def _response_body(response: httpx.Response) -> Any:
        """Parsed JSON body, falling back to raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text or None

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise specific RiotAPIError subclass for non-2xx responses."""
        status = response.status_code
        body = self._response_body(response)
        error_class, message = _STATUS_ERRORS.get(
            status, (RiotAPIError, f"Upstream error {status}")
        )

        retry_after = None
        if status == 429:
            try:
                retry_after = float(response.headers.get("Retry-After", ""))
            except ValueError:
                retry_after = None

        raise error_class(
            message,
            status_code=status,
            response_data=body,
            retry_after=retry_after,
        )

    async def _make_request(self, url: str) -> Any:
        """
        Make a single GET request and return the parsed JSON body.

        Raises:
            RiotAPIError: For transport errors, timeouts, non-2xx statuses and
                non-JSON bodies
        """
        await self.start_session()

        if self.session is None:
            raise RiotAPIError("Session not initialized")

        try:
            response = await self.session.get(url)
        except httpx.TimeoutException as e:
            raise RiotAPIError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise RiotAPIError(f"Request failed: {e}") from e

        if not response.is_success:
            self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise RiotAPIError(
                "Malformed response body",
                status_code=response.status_code,
                response_data=response.text or None,
            ) from e

    # Account endpoints
    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> AccountDTO:
        """Get account by Riot ID (gameName#tagLine)."""
        url = self.endpoints.account_by_riot_id(game_name, tag_line)
        response = await self._make_request(url)

        if not isinstance(response, dict):
            raise RiotAPIError("Malformed account response", response_data=response)
        try:
            return AccountDTO(**response)
        except PydanticValidationError as e:
            raise RiotAPIError(
                "Account response is missing puuid", response_data=response
            ) from e

    # League endpoints
    async def get_league_entries_by_puuid(
        self, puuid: str, platform: Union[Platform, str]
    ) -> List[LeagueEntryDTO]:
        """Get league entries by PUUID."""
        url = self.endpoints.league_entries_by_puuid(puuid, platform)
        response = await self._make_request(url)

        # API returns a list of league entries
        if not isinstance(response, list):
            raise RiotAPIError(
                f"Expected list response for league entries, got {type(response).__name__}",
                response_data=response,
            )

        try:
            return [LeagueEntryDTO(**entry) for entry in response]
        except (PydanticValidationError, TypeError) as e:
            raise RiotAPIError(
                "Malformed league entry in response", response_data=response
            ) from e
