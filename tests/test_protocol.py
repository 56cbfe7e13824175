"""Tests for protocol compliance."""

from collections.abc import Iterable

import pytest

from search_coach.data import UserResponseRecord
from search_coach.leaderboard import (
    GraphDisplayNameResolver,
    InMemoryUserResponseStore,
    LeaderboardService,
    StaticDisplayNameResolver,
)
from search_coach.search import BingSearcher


def test_bing_searcher_matches_web_searcher_protocol() -> None:
    """Verify BingSearcher structurally matches the WebSearcher protocol."""
    searcher = BingSearcher()
    assert hasattr(searcher, "fetch")
    assert callable(searcher.fetch)


def test_graph_resolver_matches_display_name_resolver_protocol(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Verify GraphDisplayNameResolver structurally matches DisplayNameResolver."""
    monkeypatch.setenv("GRAPH_ACCESS_TOKEN", "test-token")
    resolver = GraphDisplayNameResolver()
    assert callable(resolver.resolve_display_names)


def test_in_memory_collaborators_match_protocols() -> None:
    assert callable(InMemoryUserResponseStore().get_user_responses)
    assert callable(StaticDisplayNameResolver({}).resolve_display_names)


class MockResponseStore:
    """A minimal implementation to verify protocol requirements."""

    async def get_user_responses(self, team_id: str, group_id: str) -> list[UserResponseRecord]:
        return [UserResponseRecord(user_id="mock", is_correct_answer=True)]


class MockResolver:
    async def resolve_display_names(self, user_ids: Iterable[str]) -> dict[str, str]:
        return {user_id: user_id.upper() for user_id in user_ids}


async def test_mock_collaborators_satisfy_protocols() -> None:
    """Any class with the right method signatures can back the service."""
    service = LeaderboardService(store=MockResponseStore(), resolver=MockResolver())
    (row,) = await service.get_leaderboard("team", "group")
    assert row.user_name == "MOCK"
    assert row.right_answers == 1
