"""Factory functions to create components from configuration."""

from search_coach.config.models import BingSearchConfig, FilterConfig, GraphConfig, SearchCoachConfig
from search_coach.filters import FilterValidator
from search_coach.leaderboard.base import DisplayNameResolver, UserResponseStore
from search_coach.leaderboard.graph import GraphDisplayNameResolver
from search_coach.leaderboard.service import LeaderboardService
from search_coach.query import QueryBuilder, RequestUriComposer
from search_coach.search.adapter import ResultAdapter
from search_coach.search.base import WebSearcher
from search_coach.search.bing import BingSearcher
from search_coach.search.service import SearchService


def create_validator(config: FilterConfig) -> FilterValidator:
    """Create a filter validator from config."""
    return FilterValidator(config)


def create_query_builder(config: SearchCoachConfig) -> QueryBuilder:
    """Create a query builder from config."""
    return QueryBuilder(config.search, config.filters)


def create_uri_composer(config: BingSearchConfig) -> RequestUriComposer:
    """Create a request URI composer from config."""
    return RequestUriComposer(config.api_url)


def create_searcher(config: BingSearchConfig) -> WebSearcher:
    """Create the search transport from config."""
    if isinstance(config, BingSearchConfig):
        return BingSearcher(timeout=config.timeout_seconds, retries=config.retries)
    msg = f"Unknown searcher config type: {type(config)}"
    raise ValueError(msg)


def create_resolver(config: GraphConfig, access_token: str | None = None) -> GraphDisplayNameResolver:
    """Create a Graph display name resolver from config."""
    return GraphDisplayNameResolver(
        access_token=access_token,
        base_url=config.base_url,
        timeout=config.timeout_seconds,
    )


def create_search_service(
    config: SearchCoachConfig,
    *,
    searcher: WebSearcher | None = None,
) -> SearchService:
    """Create a complete search service from root config.

    Args:
        config: Root configuration.
        searcher: Optional transport override.
    """
    return SearchService(
        validator=create_validator(config.filters),
        builder=create_query_builder(config),
        composer=create_uri_composer(config.search),
        searcher=searcher or create_searcher(config.search),
        adapter=ResultAdapter(),
    )


def create_leaderboard_service(
    config: SearchCoachConfig,
    store: UserResponseStore,
    *,
    resolver: DisplayNameResolver | None = None,
) -> LeaderboardService:
    """Create a leaderboard service from root config.

    Args:
        config: Root configuration.
        store: Source of response records.
        resolver: Optional display name resolver. Defaults to Microsoft Graph.
    """
    return LeaderboardService(
        store=store,
        resolver=resolver or create_resolver(config.graph),
    )
