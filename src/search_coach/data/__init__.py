"""Data models for the search coach."""

from search_coach.data.models import Freshness, LeaderboardRow, NormalizedQuery, UserResponseRecord
from search_coach.data.web import WebPageResult

__all__ = [
    "Freshness",
    "LeaderboardRow",
    "NormalizedQuery",
    "UserResponseRecord",
    "WebPageResult",
]
