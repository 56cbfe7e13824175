"""Fold response records and display names into leaderboard rows."""

from collections.abc import Iterable, Mapping

from search_coach.data import LeaderboardRow, UserResponseRecord
from search_coach.errors import MissingDisplayNameError


def distinct_user_ids(records: Iterable[UserResponseRecord]) -> list[str]:
    """Return the distinct user ids in *records*, in first-seen order."""
    return list(dict.fromkeys(record.user_id for record in records))


def lookup_display_name(names: Mapping[str, str], user_id: str) -> str:
    """Return the display name for *user_id*.

    Raises:
        MissingDisplayNameError: If *names* has no entry for the user.
    """
    try:
        return names[user_id]
    except KeyError:
        raise MissingDisplayNameError(user_id) from None


class ResponseAggregator:
    """Group response records by user and count answers per user."""

    def aggregate(
        self,
        records: Iterable[UserResponseRecord] | None,
        names: Mapping[str, str],
    ) -> list[LeaderboardRow]:
        """Build one leaderboard row per distinct user.

        Right answers and attempted questions are counted independently over
        the same group, so a record may count toward either, both or neither.

        Args:
            records: Response records for one team/group.
            names: Display names covering every user id in *records*.

        Returns:
            Rows in first-seen user order; empty when there are no records.

        Raises:
            MissingDisplayNameError: If a user id has no display name.
        """
        groups: dict[str, list[UserResponseRecord]] = {}
        for record in records or ():
            groups.setdefault(record.user_id, []).append(record)

        rows: list[LeaderboardRow] = []
        for user_id, group in groups.items():
            rows.append(
                LeaderboardRow(
                    user_name=lookup_display_name(names, user_id),
                    right_answers=sum(1 for r in group if r.is_correct_answer),
                    questions_attempted=sum(1 for r in group if r.is_question_attempted),
                )
            )
        return rows
