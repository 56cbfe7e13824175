"""Display name lookups using the Microsoft Graph users API."""

import asyncio
import logging
import os
from collections.abc import Iterable
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

GRAPH_API_URL = "https://graph.microsoft.com/v1.0"


class GraphDisplayNameResolver:
    """Resolve user ids to display names with Microsoft Graph.

    Each id is fetched with ``GET /users/{id}?$select=id,displayName``. Failed
    lookups are logged and left out of the result.

    Args:
        access_token: Graph bearer token (defaults to GRAPH_ACCESS_TOKEN env var).
        base_url: Graph API root (default ``https://graph.microsoft.com/v1.0``).
        timeout: Request timeout in seconds (default 30).
    """

    def __init__(
        self,
        *,
        access_token: str | None = None,
        base_url: str = GRAPH_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self._access_token = access_token or os.environ.get("GRAPH_ACCESS_TOKEN")
        if not self._access_token:
            raise ValueError(
                "Graph access token required. Pass access_token or set GRAPH_ACCESS_TOKEN env var."
            )
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def resolve_display_names(self, user_ids: Iterable[str]) -> dict[str, str]:
        """Resolve display names for the given user ids.

        Args:
            user_ids: User object ids. Duplicates are looked up once.

        Returns:
            Mapping of user id to display name for every successful lookup.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        headers = {"Authorization": f"Bearer {self._access_token}"}
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            tasks = [self._resolve_single(client, user_id, headers) for user_id in unique_ids]
            results = await asyncio.gather(*tasks, return_exceptions=True)

        names: dict[str, str] = {}
        for user_id, result in zip(unique_ids, results):
            if isinstance(result, BaseException):
                logger.warning(f"Error resolving display name for user {user_id}. Error: {result}")
                continue
            names[user_id] = result
        return names

    async def _resolve_single(
        self,
        client: httpx.AsyncClient,
        user_id: str,
        headers: dict[str, str],
    ) -> str:
        """Fetch the display name of a single user."""
        response = await client.get(
            f"{self._base_url}/users/{quote(user_id, safe='')}",
            params={"$select": "id,displayName"},
            headers=headers,
        )
        response.raise_for_status()
        data = response.json()
        display_name = data.get("displayName")
        if display_name is None:
            raise ValueError(f"Graph returned no displayName for user {user_id}")
        return display_name
