"""Compose Bing Web Search request URIs from normalized queries.

Reference: https://learn.microsoft.com/en-us/bing/search-apis/bing-web-search/reference/query-parameters
"""

from urllib.parse import quote

from search_coach.data import Freshness, NormalizedQuery

# Freshness code -> provider token. ANY means the parameter is left out.
_FRESHNESS_TOKENS: dict[str, str | None] = {
    Freshness.ANY: None,
    Freshness.DAY: "Day",
    Freshness.WEEK: "Week",
    Freshness.MONTH: "Month",
}

# TODO: unknown codes fall back to a one-month window rather than "any";
# confirm with product owners whether that default should change.
_FALLBACK_TOKEN = "Month"


def freshness_token(code: str) -> str | None:
    """Return the provider freshness token for *code*, or None to omit it."""
    return _FRESHNESS_TOKENS.get(code, _FALLBACK_TOKEN)


def search_expression(query: NormalizedQuery) -> str:
    """Return the search text with any domain restriction appended.

    ``COVID`` with domains ``.com`` and ``.org`` becomes
    ``COVID (site:.com OR site:.org)``.
    """
    if not query.domains:
        return query.search_text
    sites = " OR ".join(f"site:{domain}" for domain in query.domains)
    return f"{query.search_text} ({sites})"


class RequestUriComposer:
    """Render a :class:`NormalizedQuery` in the provider's query-string grammar.

    Structural parameters are written as literal ``key=value`` pairs in a fixed
    order; only the free-text search expression is percent-encoded.

    Args:
        api_url: Provider endpoint, e.g. ``https://api.bing.microsoft.com/v7.0/search``.
    """

    def __init__(self, api_url: str) -> None:
        self._api_url = api_url

    def compose(self, query: NormalizedQuery) -> str:
        params: list[tuple[str, str]] = [
            ("mkt", query.market),
            ("count", str(query.page_size)),
        ]
        token = freshness_token(query.freshness_code)
        if token is not None:
            params.append(("freshness", token))
        params.extend(
            [
                ("safeSearch", query.safety_level),
                ("offset", str(query.offset)),
                ("q", quote(search_expression(query), safe="")),
            ]
        )
        query_string = "&".join(f"{key}={value}" for key, value in params)
        return f"{self._api_url}?{query_string}"
