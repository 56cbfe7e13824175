"""Adapt the Bing Web Search JSON envelope into typed results."""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from search_coach.data import WebPageResult
from search_coach.errors import ResultAdaptationError

logger = logging.getLogger(__name__)

_WEB_PAGES = TypeAdapter(list[WebPageResult])


class ResultAdapter:
    """Extract ``webPages.value`` from a provider response.

    A missing section is a normal, empty outcome. A section that is present
    but malformed fails the whole call; partial lists are never returned.
    """

    def adapt(self, raw_envelope: str | bytes) -> list[WebPageResult]:
        """Parse *raw_envelope* into web page results.

        Args:
            raw_envelope: Raw JSON response body.

        Returns:
            Parsed results, or an empty list when the provider sent none.

        Raises:
            ResultAdaptationError: If the envelope or a present results
                section cannot be parsed.
        """
        try:
            envelope: Any = json.loads(raw_envelope)
        except (TypeError, ValueError) as e:
            raise ResultAdaptationError(f"Search response is not valid JSON: {e}") from e

        if not isinstance(envelope, dict):
            raise ResultAdaptationError(
                f"Expected a JSON object, got {type(envelope).__name__}"
            )

        web_pages = envelope.get("webPages")
        if web_pages is None:
            logger.info("Bing search webpages results are not available.")
            return []
        if not isinstance(web_pages, dict):
            raise ResultAdaptationError(
                f"Expected 'webPages' to be an object, got {type(web_pages).__name__}"
            )

        value = web_pages.get("value")
        if value is None:
            logger.info("Bing search webpages results are not available.")
            return []

        try:
            return _WEB_PAGES.validate_python(value)
        except ValidationError as e:
            raise ResultAdaptationError(
                f"Could not parse 'webPages.value': {e.error_count()} error(s)"
            ) from e
