from typing import Protocol


class WebSearcher(Protocol):
    """Interface for fetching a raw web search response."""

    async def fetch(self, uri: str, *, application_key: str) -> str:
        """Fetch the provider response for a composed request URI.

        Args:
            uri: Fully composed request URI.
            application_key: Provider subscription key.

        Returns:
            The raw JSON response body.
        """
        ...
