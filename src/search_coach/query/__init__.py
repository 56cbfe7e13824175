"""Query shaping and request URI composition."""

from search_coach.query.builder import QueryBuilder, normalize_freshness
from search_coach.query.uri import RequestUriComposer, freshness_token, search_expression

__all__ = [
    "QueryBuilder",
    "RequestUriComposer",
    "freshness_token",
    "normalize_freshness",
    "search_expression",
]
