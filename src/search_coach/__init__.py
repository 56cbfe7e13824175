"""Search Coach: filter validation, Bing query shaping and quiz leaderboards for classroom search lessons."""

from search_coach.config import (
    BingSearchConfig,
    FilterConfig,
    GraphConfig,
    LoggingConfig,
    SearchCoachConfig,
    load_config,
)
from search_coach.data import (
    Freshness,
    LeaderboardRow,
    NormalizedQuery,
    UserResponseRecord,
    WebPageResult,
)
from search_coach.errors import (
    InvalidInputError,
    MissingDisplayNameError,
    QueryShapingError,
    ResultAdaptationError,
    SearchCoachError,
)
from search_coach.filters import FilterCheck, FilterValidator, split_domain_values
from search_coach.leaderboard import (
    DisplayNameResolver,
    GraphDisplayNameResolver,
    InMemoryUserResponseStore,
    LeaderboardService,
    ResponseAggregator,
    StaticDisplayNameResolver,
    UserResponseStore,
)
from search_coach.query import QueryBuilder, RequestUriComposer
from search_coach.search import BingSearcher, ResultAdapter, SearchService, WebSearcher

__all__ = [
    # Models
    "Freshness",
    "LeaderboardRow",
    "NormalizedQuery",
    "UserResponseRecord",
    "WebPageResult",
    # Errors
    "InvalidInputError",
    "MissingDisplayNameError",
    "QueryShapingError",
    "ResultAdaptationError",
    "SearchCoachError",
    # Functions
    "split_domain_values",
    # Protocols
    "DisplayNameResolver",
    "UserResponseStore",
    "WebSearcher",
    # Search
    "BingSearcher",
    "FilterCheck",
    "FilterValidator",
    "QueryBuilder",
    "RequestUriComposer",
    "ResultAdapter",
    "SearchService",
    # Leaderboard
    "GraphDisplayNameResolver",
    "InMemoryUserResponseStore",
    "LeaderboardService",
    "ResponseAggregator",
    "StaticDisplayNameResolver",
    # Config
    "BingSearchConfig",
    "FilterConfig",
    "GraphConfig",
    "LoggingConfig",
    "SearchCoachConfig",
    "load_config",
]
