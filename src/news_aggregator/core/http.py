"""
Shared HTTP client infrastructure for the news providers.

Provides BaseApiClient: a lazily-created httpx.AsyncClient with a per-request
timeout and uniform error translation. No retries or rate limiting: one
request is issued per call.

Usage:
    class MyClient(BaseApiClient):
        BASE_URL = "https://api.example.com"

        async def get_data(self) -> dict:
            return await self._get("/data", params={"q": "news"})
"""

import asyncio
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """Base exception for external API errors."""

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int = 502,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Async HTTP client base with timeout and error handling.

    Subclasses set BASE_URL and add provider-specific methods.
    Use as an async context manager:

        async with MyClient() as client:
            data = await client._get("/endpoint")

    Or with lazy initialisation (for long-lived services):

        client = MyClient()
        data = await client._get("/endpoint")  # client auto-creates on first use
        await client.close()
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    async def __aenter__(self) -> "BaseApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def is_configured(self) -> bool:
        """
        Check if the client has required configuration (API keys, etc.).

        Override in subclasses that need configuration validation.
        """
        return True

    # -- HTTP methods --------------------------------------------------------

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single GET request and return the decoded JSON body.

        Raises:
            ExternalAPIError: On timeout, transport failure, non-2xx status
                or a body that is not valid JSON
        """
        try:
            # httpx.Timeout bounds each phase separately; this bounds the whole request
            async with asyncio.timeout(self._timeout):
                response = await self.client.get(path, params=params)
            response.raise_for_status()
        except (httpx.TimeoutException, TimeoutError) as e:
            raise ExternalAPIError(
                f"Request to {path} timed out after {self._timeout}s",
                code="TIMEOUT",
                status_code=504,
            ) from e
        except httpx.HTTPStatusError as e:
            raise ExternalAPIError(
                f"HTTP {e.response.status_code}: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise ExternalAPIError(f"Request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ExternalAPIError(f"Invalid JSON from {path}: {e}") from e
