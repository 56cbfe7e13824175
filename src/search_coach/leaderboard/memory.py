"""In-memory and JSON-file backed leaderboard collaborators."""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from search_coach.data import UserResponseRecord


class StoredResponse(BaseModel):
    """A response record as exported from the responses table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    team_id: str = Field(alias="teamId")
    group_id: str = Field(alias="groupId")
    user_id: str = Field(alias="userId")
    is_correct_answer: bool = Field(default=False, alias="isCorrectAnswer")
    is_question_attempted: bool = Field(default=False, alias="isQuestionAttempted")

    def to_record(self) -> UserResponseRecord:
        return UserResponseRecord(
            user_id=self.user_id,
            is_correct_answer=self.is_correct_answer,
            is_question_attempted=self.is_question_attempted,
        )


_STORED_RESPONSES = TypeAdapter(list[StoredResponse])
_DISPLAY_NAMES = TypeAdapter(dict[str, str])


class InMemoryUserResponseStore:
    """Response records held in memory, keyed by team and group."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], list[UserResponseRecord]] = {}

    def add(self, team_id: str, group_id: str, record: UserResponseRecord) -> None:
        self._records.setdefault((team_id, group_id), []).append(record)

    def extend(self, responses: Iterable[StoredResponse]) -> None:
        for response in responses:
            self.add(response.team_id, response.group_id, response.to_record())

    async def get_user_responses(self, team_id: str, group_id: str) -> list[UserResponseRecord]:
        return list(self._records.get((team_id, group_id), []))


class StaticDisplayNameResolver:
    """Resolve display names from a fixed mapping."""

    def __init__(self, names: Mapping[str, str]) -> None:
        self._names = dict(names)

    async def resolve_display_names(self, user_ids: Iterable[str]) -> dict[str, str]:
        return {user_id: self._names[user_id] for user_id in user_ids if user_id in self._names}


def load_response_records(path: Path | str) -> InMemoryUserResponseStore:
    """Load a JSON array of stored responses into an in-memory store.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        pydantic.ValidationError: If a record is malformed.
    """
    with Path(path).open() as f:
        raw = json.load(f)
    store = InMemoryUserResponseStore()
    store.extend(_STORED_RESPONSES.validate_python(raw))
    return store


def load_display_names(path: Path | str) -> StaticDisplayNameResolver:
    """Load a JSON object of user id -> display name."""
    with Path(path).open() as f:
        raw = json.load(f)
    return StaticDisplayNameResolver(_DISPLAY_NAMES.validate_python(raw))
