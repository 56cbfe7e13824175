"""Shape validated filter input into a NormalizedQuery."""

import logging
import os
from collections.abc import Sequence

from search_coach.config.models import BingSearchConfig, FilterConfig
from search_coach.data import Freshness, NormalizedQuery
from search_coach.filters.validator import FilterValidator

logger = logging.getLogger(__name__)

# Keys sent by the tab UI instead of its display strings
_FRESHNESS_KEYS: dict[str, Freshness] = {
    "1": Freshness.ANY,
    "2": Freshness.DAY,
    "3": Freshness.WEEK,
    "4": Freshness.MONTH,
}


def normalize_freshness(freshness: str | None) -> str:
    """Map a raw freshness value to a :class:`Freshness` code.

    Accepts the UI's numeric keys or the code names (any case). Blank input
    means no recency filter. Anything else is returned stripped but otherwise
    untouched so the URI composer can apply its fallback.
    """
    if freshness is None or not freshness.strip():
        return Freshness.ANY
    value = freshness.strip()
    if value in _FRESHNESS_KEYS:
        return _FRESHNESS_KEYS[value]
    try:
        return Freshness(value.lower())
    except ValueError:
        return value


class QueryBuilder:
    """Build :class:`NormalizedQuery` objects from validated filter input.

    Page size, offset, safety level and the application key come from
    configuration, never from the caller.

    Args:
        search_config: Provider settings (defaults to :class:`BingSearchConfig`).
        filter_config: Filter allow-lists and the "no filter" sentinel.
        application_key: Bing API key (defaults to ``search_config.api_key``,
            then the BING_SEARCH_API_KEY env var).
    """

    def __init__(
        self,
        search_config: BingSearchConfig | None = None,
        filter_config: FilterConfig | None = None,
        *,
        application_key: str | None = None,
    ) -> None:
        self._search = search_config or BingSearchConfig()
        self._filters = filter_config or FilterConfig()
        self._validator = FilterValidator(self._filters)
        self._application_key = (
            application_key or self._search.api_key or os.environ.get("BING_SEARCH_API_KEY")
        )
        if not self._application_key:
            raise ValueError(
                "Bing Search API key required. "
                "Pass application_key, set search.api_key or set BING_SEARCH_API_KEY env var."
            )

    def resolve_market(self, market: str) -> str | None:
        """Return the allow-list market for *market*.

        The "no filter" sentinel resolves to the configured default market.
        Anything that does not match exactly one allowed market resolves to None.
        """
        if self._validator.is_no_filter(market):
            return self._search.default_market
        return self._validator.check_market(market).value

    def resolve_domains(self, domains: Sequence[str] | None) -> tuple[str, ...] | None:
        """Return the allow-list suffixes for *domains*, or None if any is unknown.

        Blank entries are dropped and repeated suffixes are kept once.
        """
        resolved: list[str] = []
        for domain in domains or ():
            if not domain or not domain.strip():
                continue
            check = self._validator.check_domain(domain)
            if check.value is None:
                return None
            resolved.append(check.value)
        return tuple(dict.fromkeys(resolved))

    def build(
        self,
        search_text: str | None,
        market: str | None,
        freshness: str | None,
        domains: Sequence[str] | None,
    ) -> NormalizedQuery | None:
        """Build a normalized query.

        Markup or script-like text is not rejected here; the search expression
        is percent-encoded when the request URI is composed. The market and
        domains are replaced by the allow-list entries they matched.

        Args:
            search_text: Free text entered by the user.
            market: Validated market code or the "no filter" sentinel.
            freshness: Raw freshness value from the request.
            domains: Validated domain suffixes.

        Returns:
            The normalized query, or None if the input could not be shaped.
        """
        if search_text is None or market is None:
            logger.error("Cannot build search query: search text or market is missing.")
            return None

        text = search_text.strip()
        if not text:
            logger.error("Cannot build search query: search text is empty after trimming.")
            return None

        resolved_market = self.resolve_market(market)
        if resolved_market is None:
            logger.error(f"Cannot build search query: market {market!r} is not supported.")
            return None

        resolved_domains = self.resolve_domains(domains)
        if resolved_domains is None:
            logger.error(
                f"Cannot build search query: domains {list(domains or ())} are not supported."
            )
            return None

        return NormalizedQuery(
            search_text=text,
            market=resolved_market,
            domains=resolved_domains,
            freshness_code=normalize_freshness(freshness),
            page_size=self._search.page_size,
            offset=self._search.offset,
            safety_level=self._search.safe_search,
            application_key=self._application_key,
        )
