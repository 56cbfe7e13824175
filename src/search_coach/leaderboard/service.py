"""Leaderboard request handling."""

import logging

from search_coach.data import LeaderboardRow
from search_coach.errors import InvalidInputError
from search_coach.leaderboard.aggregator import ResponseAggregator, distinct_user_ids
from search_coach.leaderboard.base import DisplayNameResolver, UserResponseStore

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Fetch response records, resolve display names and aggregate per user.

    Names are resolved only after the record batch is available, and only for
    the user ids present in it.

    Args:
        store: Source of response records.
        resolver: Display name resolver.
        aggregator: Response aggregator (defaults to a new :class:`ResponseAggregator`).
    """

    def __init__(
        self,
        *,
        store: UserResponseStore,
        resolver: DisplayNameResolver,
        aggregator: ResponseAggregator | None = None,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._aggregator = aggregator or ResponseAggregator()

    async def get_leaderboard(self, team_id: str | None, group_id: str | None) -> list[LeaderboardRow]:
        """Build the leaderboard for a team/group.

        Raises:
            InvalidInputError: If either identifier is missing.
            MissingDisplayNameError: If a user's display name was not resolved.
        """
        if not team_id:
            logger.error("User's responses - Team id is null or empty.")
            raise InvalidInputError("Team id can not be null or empty.")
        if not group_id:
            logger.error("User's responses - Group id is null or empty.")
            raise InvalidInputError("Group id can not be null or empty.")

        records = await self._store.get_user_responses(team_id, group_id)
        if not records:
            logger.info(f"No responses recorded yet for team {team_id}, group {group_id}")
            return []

        names = await self._resolver.resolve_display_names(distinct_user_ids(records))
        rows = self._aggregator.aggregate(records, names)
        logger.info(f"Built leaderboard with {len(rows)} rows for team {team_id}")
        return rows
