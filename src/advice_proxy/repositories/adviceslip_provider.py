"""Advice Slip based advice provider.

Fetches a random advice record from https://api.adviceslip.com over HTTPS.
The endpoint answers ``GET /advice`` with::

    {"slip": {"id": 117, "advice": "It is easy to sit up and take notice..."}}

The body is treated as untyped input: every failure mode (connection
error, timeout, non-2xx status, non-JSON body, missing or malformed
``slip``) is reported as UpstreamError so the caller never sees a raw
httpx or pydantic exception.
"""

import logging

import httpx
from pydantic import ValidationError

from advice_proxy.config import settings
from advice_proxy.dto import AdviceSlipPayload
from advice_proxy.entities import AdviceEntity
from advice_proxy.errors import UpstreamError

logger = logging.getLogger(__name__)


class AdviceSlipProvider:
    """Advice Slip implementation of the AdviceProvider protocol.

    This class satisfies the AdviceProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = AdviceSlipProvider.create()
        advice = await provider.fetch()
        print(advice.id, advice.text)
        await provider.close()
        ```
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            url: Advice endpoint. Defaults to settings.advice_api_url.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            client: Pre-built HTTP client. When given, the provider does not
                close it; the caller owns it.
        """
        self._url = url or settings.advice_api_url
        self._timeout = timeout or settings.upstream_timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        url: str | None = None,
        timeout: float | None = None,
    ) -> "AdviceSlipProvider":
        """Factory method to create AdviceSlipProvider with defaults.

        Args:
            url: Advice endpoint. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured AdviceSlipProvider
        """
        return cls(url=url, timeout=timeout)

    async def fetch(self) -> AdviceEntity:
        """Fetch one advice record from the upstream.

        Returns:
            The advice supplied by the upstream

        Raises:
            UpstreamError: If the request fails or the payload is malformed
        """
        try:
            response = await self.client.get(self._url)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Advice API timed out after %ss: %s", self._timeout, self._url)
            raise UpstreamError(f"Advice API timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            logger.warning("Advice API returned %d", e.response.status_code)
            raise UpstreamError(
                f"Advice API returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Advice API request failed: %s", e)
            raise UpstreamError(f"Advice API error: {e}") from e
        except ValueError as e:
            logger.warning("Advice API returned a non-JSON body")
            raise UpstreamError(f"Advice API returned invalid JSON: {e}") from e

        try:
            payload = AdviceSlipPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Advice API payload rejected: %s", data)
            raise UpstreamError(f"Unexpected advice payload: {data}") from e

        advice = payload.slip.to_entity()
        logger.debug("Fetched advice %d from upstream", advice.id)
        return advice

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
