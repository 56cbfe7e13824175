from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from search_coach.data import UserResponseRecord


class UserResponseStore(Protocol):
    """Interface for reading quiz response records."""

    async def get_user_responses(self, team_id: str, group_id: str) -> Sequence[UserResponseRecord]:
        """Return every response record stored for a team/group pair."""
        ...


class DisplayNameResolver(Protocol):
    """Interface for resolving user ids to display names."""

    async def resolve_display_names(self, user_ids: Iterable[str]) -> Mapping[str, str]:
        """Return a user id -> display name mapping.

        Ids that could not be resolved are left out of the mapping.
        """
        ...
