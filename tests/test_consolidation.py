"""Unit tests for the activity feed consolidation."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from consumed.application.use_cases.feed import consolidate
from consumed.domain.entities import (
    ActionType,
    Engagement,
    FinishedEvent,
    ListAddEvent,
    MediaItem,
    RatingEvent,
    SharedActivityEvent,
)

BASE = datetime(2024, 5, 10, 10, 0, tzinfo=timezone.utc)
DAY = 24 * 60 * 60


def _item(title: str, *, rating: float | None = None) -> MediaItem:
    return MediaItem(
        id=f"embedded_{title}",
        title=title,
        media_type="movie",
        external_id=title.lower().replace(" ", "-"),
        external_source="tmdb",
        rating=rating,
    )


def _add(post_id, user_id, minutes, *, list_name="Want To", title=None):
    return ListAddEvent(
        id=post_id,
        user_id=user_id,
        media_item=_item(title or f"Title {post_id}"),
        timestamp=BASE + timedelta(minutes=minutes),
        list_name=list_name,
    )


def _rating(post_id, user_id, minutes, rating):
    return RatingEvent(
        id=post_id,
        user_id=user_id,
        media_item=_item(f"Title {post_id}", rating=rating),
        timestamp=BASE + timedelta(minutes=minutes),
    )


def test_empty_input_returns_no_groups():
    assert consolidate([]) == []


def test_three_additions_to_one_list_become_one_card():
    events = [_add("p1", "u1", 0), _add("p2", "u1", 5), _add("p3", "u1", 10)]

    groups = consolidate(events, DAY)

    assert len(groups) == 1
    group = groups[0]
    assert group.kind == "list_adds"
    assert group.total_items == 3
    assert group.total_lists == 1
    assert group.header_text == "added to → Want To"
    assert group.summary_text == "added 3 items to Want To"
    assert group.remaining_count == 0
    assert [item.title for item in group.items] == ["Title p3", "Title p2", "Title p1"]
    assert group.original_post_ids == ["p3", "p2", "p1"]


def test_additions_to_two_lists_share_a_card():
    events = [
        _add("p1", "u1", 1, list_name="Want To"),
        _add("p2", "u1", 0, list_name="Currently"),
    ]

    groups = consolidate(events, DAY)

    assert len(groups) == 1
    group = groups[0]
    assert group.total_lists == 2
    assert [list_group.list_name for list_group in group.lists] == ["Want To", "Currently"]
    assert group.header_text == "added to → Want To"
    assert group.summary_text == "added 2 items across 2 lists"
    assert [slide.title for slide in group.slides] == ["Added to Want To", "Added to Currently"]


@pytest.mark.parametrize(("hours", "expected_groups"), [(23, 1), (24, 1), (25, 2)])
def test_window_boundary(hours, expected_groups):
    events = [_add("p1", "u1", 0), _add("p2", "u1", hours * 60)]

    groups = consolidate(events, DAY)

    assert len(groups) == expected_groups
    assert sum(group.total_items for group in groups) == 2


def test_groups_never_mix_users():
    events = [
        _add("p1", "u1", 0),
        _add("p2", "u2", 1),
        _add("p3", "u1", 2),
        _add("p4", "u2", 3),
    ]

    groups = consolidate(events, DAY)

    assert len(groups) == 2
    for group in groups:
        owners = {event.user_id for event in events if event.id in group.original_post_ids}
        assert owners == {group.user_id}
    assert sum(group.total_items for group in groups) == len(events)


def test_different_action_types_are_separate_cards():
    events = [
        _add("p1", "u1", 0),
        _rating("p2", "u1", 1, 4),
        FinishedEvent(
            id="p3", user_id="u1", media_item=_item("Dune"), timestamp=BASE
        ),
    ]

    groups = consolidate(events, DAY)

    assert sorted(group.kind for group in groups) == ["finished", "list_adds", "ratings"]
    finished = next(group for group in groups if group.action_type is ActionType.FINISHED)
    assert finished.header_text == "finished Dune"


def test_preview_is_capped_at_three_items():
    events = [_add(f"p{index}", "u1", index) for index in range(5)]

    group = consolidate(events, DAY)[0]

    assert group.total_items == 5
    assert len(group.preview_items) == 3
    assert group.remaining_count == 2
    assert len(group.items) == 5


def test_zero_rating_is_still_a_rating():
    events = [_rating("p1", "u1", 0, 0)]

    group = consolidate(events, DAY)[0]

    assert group.items[0].has_rating
    assert group.slides[0].rating == 0
    assert group.slides[0].title == "Rated 0 stars"
    assert group.header_text == "rated Title p1"


def test_rating_slides_follow_rating_values():
    events = [
        _rating("p1", "u1", 0, 5),
        _rating("p2", "u1", 1, 3),
        _rating("p3", "u1", 2, 5),
    ]

    group = consolidate(events, DAY)[0]

    assert [slide.rating for slide in group.slides] == [5, 3]
    assert [slide.title for slide in group.slides] == ["Rated 5 stars", "Rated 3 stars"]
    assert sum(len(slide.items) for slide in group.slides) == group.total_items
    assert group.summary_text == "rated 3 items"


def test_malformed_timestamp_is_skipped(caplog):
    events = [
        _add("p1", "u1", 0),
        ListAddEvent(
            id="bad",
            user_id="u1",
            media_item=_item("Broken"),
            timestamp="not-a-date",
            list_name="Want To",
        ),
    ]

    with caplog.at_level(logging.WARNING):
        groups = consolidate(events, DAY)

    assert len(groups) == 1
    assert groups[0].original_post_ids == ["p1"]
    assert "malformed timestamp" in caplog.text


def test_iso_string_timestamps_are_accepted():
    events = [
        ListAddEvent(
            id="p1",
            user_id="u1",
            media_item=_item("A"),
            timestamp="2024-05-10T10:00:00Z",
            list_name="Want To",
        ),
        ListAddEvent(
            id="p2",
            user_id="u1",
            media_item=_item("B"),
            timestamp="2024-05-10T11:00:00+00:00",
            list_name="Want To",
        ),
    ]

    groups = consolidate(events, DAY)

    assert len(groups) == 1
    assert groups[0].timestamp == datetime(2024, 5, 10, 11, 0, tzinfo=timezone.utc)


def test_unknown_action_routes_to_shared_activity():
    event = SharedActivityEvent(
        id="p1",
        user_id="u1",
        media_item=_item("Poll"),
        timestamp=BASE,
        raw_action_type="poll",
    )

    group = consolidate([event], DAY)[0]

    assert group.kind == "shared"
    assert group.header_text == "shared activity"
    assert group.slides[0].type == "activity"


def test_engagement_comes_from_first_post():
    events = [_add("p1", "u1", 0), _add("p2", "u1", 5)]
    engagement = {
        "p2": Engagement(likes=4, comments=2, liked_by_current_user=True),
        "p1": Engagement(likes=9, comments=9),
    }

    group = consolidate(events, DAY, engagement=engagement)[0]

    assert group.representative_post_id == "p2"
    assert (group.likes, group.comments, group.liked_by_current_user) == (4, 2, True)


def test_missing_engagement_defaults_to_zero():
    group = consolidate([_add("p1", "u1", 0)], DAY)[0]

    assert (group.likes, group.comments, group.liked_by_current_user) == (0, 0, False)


def test_groups_are_ordered_newest_first():
    events = [
        _add("old", "u1", 0),
        _add("new", "u2", 60),
        _add("mid", "u3", 30),
    ]

    groups = consolidate(events, DAY)

    assert [group.original_post_ids[0] for group in groups] == ["new", "mid", "old"]


def test_single_item_card_is_not_consolidated():
    group = consolidate([_add("p1", "u1", 0)], DAY)[0]

    assert not group.is_consolidated
    assert group.summary_text == "added 1 item to Want To"


def test_missing_rating_is_not_shown_as_zero():
    events = [
        _rating("p1", "u1", 0, None),
        _rating("p2", "u1", 1, 0),
    ]

    group = consolidate(events, DAY)[0]

    titles = {slide.rating: slide.title for slide in group.slides}
    assert titles == {0: "Rated 0 stars", None: "Rated"}
    assert not group.items[-1].has_rating


def test_event_without_user_is_skipped(caplog):
    events = [
        _add("p1", "u1", 0),
        _add("p2", "u1", 5),
        ListAddEvent(
            id="orphan",
            user_id=None,
            media_item=_item("Nobody"),
            timestamp=BASE,
            list_name="Want To",
        ),
        _rating("p3", "u2", 10, 4),
    ]

    with caplog.at_level(logging.WARNING):
        groups = consolidate(events, DAY)

    assert sum(group.total_items for group in groups) == 3
    assert all("orphan" not in group.original_post_ids for group in groups)
    assert "without a user" in caplog.text
