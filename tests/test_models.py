"""Tests for data models."""

import dataclasses

import pytest

from search_coach.data import Freshness, LeaderboardRow, NormalizedQuery, UserResponseRecord, WebPageResult


def test_normalized_query_minimal() -> None:
    query = NormalizedQuery(search_text="COVID", market="en-US")
    assert query.domains == ()
    assert query.freshness_code == Freshness.ANY
    assert query.page_size == 20
    assert query.offset == 0
    assert query.application_key == ""


def test_normalized_query_is_immutable() -> None:
    query = NormalizedQuery(search_text="COVID", market="en-US")
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.search_text = "other"  # type: ignore[misc]


def test_freshness_values() -> None:
    assert [f.value for f in Freshness] == ["any", "day", "week", "month"]
    assert Freshness("week") is Freshness.WEEK


def test_user_response_record_defaults() -> None:
    record = UserResponseRecord(user_id="u1")
    assert record.is_correct_answer is False
    assert record.is_question_attempted is False


def test_leaderboard_row_defaults() -> None:
    row = LeaderboardRow(user_name="Alice")
    assert row.right_answers == 0
    assert row.questions_attempted == 0


def test_web_page_result_from_provider_fields() -> None:
    page = WebPageResult.model_validate(
        {"name": "Title", "url": "https://example.com", "displayUrl": "example.com"}
    )
    assert page.title == "Title"
    assert page.display_url == "example.com"


def test_web_page_result_by_field_name() -> None:
    page = WebPageResult(name="Title", display_url="example.com")
    assert page.display_url == "example.com"


def test_web_page_result_title_defaults_to_empty() -> None:
    assert WebPageResult().title == ""
