"""Exceptions raised by the search coach services."""


class SearchCoachError(Exception):
    """Base class for search coach errors."""


class InvalidInputError(SearchCoachError):
    """Raised when a request carries missing or disallowed filter/identifier values."""


class QueryShapingError(SearchCoachError):
    """Raised when validated input could not be shaped into a query.

    Validation runs first, so this points at a bug rather than bad input.
    """


class ResultAdaptationError(SearchCoachError):
    """Raised when a present section of the provider payload cannot be parsed."""


class MissingDisplayNameError(SearchCoachError):
    """Raised when a user id in a response batch has no resolved display name."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No display name resolved for user id {user_id!r}")
        self.user_id = user_id
