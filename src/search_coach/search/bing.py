"""Bing Web Search transport using httpx."""

import logging

import httpx

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class BingSearcher:
    """Issue Bing Web Search requests.

    Connection failures are retried by the httpx transport; HTTP error
    statuses are raised as :class:`httpx.HTTPStatusError`.

    Args:
        timeout: Request timeout in seconds (default 30).
        retries: Connection retries per request (default 2).
    """

    def __init__(self, *, timeout: float = 30.0, retries: int = 2) -> None:
        self._timeout = timeout
        self._retries = retries

    async def fetch(self, uri: str, *, application_key: str) -> str:
        """Fetch the raw JSON body for *uri*."""
        transport = httpx.AsyncHTTPTransport(retries=self._retries)
        headers = {SUBSCRIPTION_KEY_HEADER: application_key}
        async with httpx.AsyncClient(timeout=self._timeout, transport=transport) as client:
            response = await client.get(uri, headers=headers)
        response.raise_for_status()
        logger.debug(f"Bing search responded with {len(response.text)} characters")
        return response.text
