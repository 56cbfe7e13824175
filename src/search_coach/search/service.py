"""End-to-end search request handling."""

import logging

from search_coach.data import WebPageResult
from search_coach.errors import InvalidInputError, QueryShapingError
from search_coach.filters import FilterValidator
from search_coach.query import QueryBuilder, RequestUriComposer
from search_coach.search.adapter import ResultAdapter
from search_coach.search.base import WebSearcher

logger = logging.getLogger(__name__)


class SearchService:
    """Validate raw filter input, query the provider and adapt its response.

    Flow:
    1. Reject blank search text, unsupported markets and unsupported domains
    2. Shape the input into a NormalizedQuery
    3. Compose the request URI and fetch it
    4. Adapt the JSON envelope into typed results

    Args:
        validator: Filter validator.
        builder: Query builder.
        composer: Request URI composer.
        searcher: Transport that fetches the composed URI.
        adapter: Result adapter (defaults to a new :class:`ResultAdapter`).
    """

    def __init__(
        self,
        *,
        validator: FilterValidator,
        builder: QueryBuilder,
        composer: RequestUriComposer,
        searcher: WebSearcher,
        adapter: ResultAdapter | None = None,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._composer = composer
        self._searcher = searcher
        self._adapter = adapter or ResultAdapter()

    def prepare(
        self,
        search_text: str | None,
        selected_country: str | None,
        freshness: str | None,
        domain_values: str | None,
    ) -> tuple[str, str]:
        """Validate the request and compose its URI.

        Returns:
            Tuple of (request URI, application key).

        Raises:
            InvalidInputError: If any filter value is missing or not allowed.
            QueryShapingError: If validated input could not be shaped.
        """
        if not search_text or not search_text.strip():
            logger.error("Search text is either null or empty.")
            raise InvalidInputError("Search text cannot be null or empty.")

        if not self._validator.is_no_filter(selected_country):
            check = self._validator.check_market(selected_country)
            if not check:
                logger.error(f"Selected country code rejected: {check.reason}")
                raise InvalidInputError("Selected country code value is null or empty or invalid.")

        domains = self._validator.split_domain_values(domain_values)
        check = self._validator.check_domains(domains)
        if not check:
            logger.error(f"Selected domain values rejected: {check.reason}")
            raise InvalidInputError("Selected domain value is null or empty or invalid.")

        query = self._builder.build(search_text, selected_country, freshness, domains)
        if query is None:
            raise QueryShapingError("Validated search input could not be shaped into a query.")

        return (self._composer.compose(query), query.application_key)

    async def search(
        self,
        search_text: str | None,
        selected_country: str | None,
        freshness: str | None,
        domain_values: str | None,
    ) -> list[WebPageResult]:
        """Run a web search for the raw request parameters.

        Args:
            search_text: Free text entered by the user.
            selected_country: Market code or the "no filter" sentinel.
            freshness: Freshness key or code.
            domain_values: Delimited domain suffixes.

        Returns:
            Web page results, possibly empty.
        """
        uri, application_key = self.prepare(search_text, selected_country, freshness, domain_values)
        raw = await self._searcher.fetch(uri, application_key=application_key)
        results = self._adapter.adapt(raw)
        logger.info(f"Bing search returned {len(results)} web pages")
        return results
