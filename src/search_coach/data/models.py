"""Core data models for the search coach."""

from dataclasses import dataclass, field
from enum import StrEnum


class Freshness(StrEnum):
    """Coarse recency filter selected on the search tab."""

    ANY = "any"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class NormalizedQuery:
    """A validated, structurally shaped web search query.

    ``freshness_code`` is normally one of the :class:`Freshness` values. An
    unrecognized code is carried through as-is and resolved when the request
    URI is composed.
    """

    search_text: str
    market: str
    domains: tuple[str, ...] = ()
    freshness_code: str = Freshness.ANY
    page_size: int = 20
    offset: int = 0
    safety_level: str = "Strict"
    application_key: str = field(default="", repr=False)


@dataclass(frozen=True)
class UserResponseRecord:
    """One user's response to one quiz question."""

    user_id: str
    is_correct_answer: bool = False
    is_question_attempted: bool = False


@dataclass(frozen=True)
class LeaderboardRow:
    """Aggregated counts for a single user.

    ``right_answers`` and ``questions_attempted`` are counted independently,
    so ``right_answers`` may exceed ``questions_attempted``.
    """

    user_name: str
    right_answers: int = 0
    questions_attempted: int = 0

    def as_json(self) -> dict[str, str | int]:
        return {
            "userName": self.user_name,
            "rightAnswers": self.right_answers,
            "questionsAttempted": self.questions_attempted,
        }
