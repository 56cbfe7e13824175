"""Leaderboard aggregation and its collaborators."""

from search_coach.leaderboard.aggregator import (
    ResponseAggregator,
    distinct_user_ids,
    lookup_display_name,
)
from search_coach.leaderboard.base import DisplayNameResolver, UserResponseStore
from search_coach.leaderboard.graph import GraphDisplayNameResolver
from search_coach.leaderboard.memory import (
    InMemoryUserResponseStore,
    StaticDisplayNameResolver,
    StoredResponse,
    load_display_names,
    load_response_records,
)
from search_coach.leaderboard.service import LeaderboardService

__all__ = [
    "DisplayNameResolver",
    "GraphDisplayNameResolver",
    "InMemoryUserResponseStore",
    "LeaderboardService",
    "ResponseAggregator",
    "StaticDisplayNameResolver",
    "StoredResponse",
    "UserResponseStore",
    "distinct_user_ids",
    "load_display_names",
    "load_response_records",
    "lookup_display_name",
]
