"""Integration tests for the consolidated feed endpoint."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def _log(client, headers, **payload):
    body = {
        "post_type": "add-to-list",
        "media_type": "movie",
        "media_external_source": "tmdb",
        "list_name": "Want To",
        **payload,
    }
    response = client.post("/posts/", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_feed_consolidates_list_additions(client, register):
    alice = register("alice", display_name="Alice")
    for title, external_id in [("Dune", "1"), ("Arrival", "2"), ("Heat", "3")]:
        _log(client, alice["headers"], media_title=title, media_external_id=external_id)

    response = client.get("/feed/", headers=alice["headers"])

    assert response.status_code == 200
    groups = response.json()["groups"]
    assert len(groups) == 1
    group = groups[0]
    assert group["kind"] == "list_adds"
    assert group["total_items"] == 3
    assert group["total_lists"] == 1
    assert group["header_text"] == "added to → Want To"
    assert group["remaining_count"] == 0
    assert group["date_label"] == "Today"
    assert group["user"]["display_name"] == "Alice"
    assert group["user"]["initial"] == "A"
    assert [item["title"] for item in group["items"]] == ["Heat", "Arrival", "Dune"]
    assert group["items"][0]["media_icon"] == "🎬"


def test_feed_reports_engagement_of_first_post(client, register):
    alice = register("alice")
    bob = register("bob")
    _log(client, alice["headers"], media_title="Dune", media_external_id="1")
    latest = _log(client, alice["headers"], media_title="Heat", media_external_id="3")
    assert client.post(f"/posts/{latest['id']}/like", headers=bob["headers"]).status_code == 200

    group = client.get("/feed/", headers=bob["headers"]).json()["groups"][0]

    assert group["original_post_ids"][0] == str(latest["id"])
    assert group["likes"] == 1
    assert group["liked_by_current_user"] is True


def test_feed_keeps_ratings_separate_and_preserves_zero(client, register):
    alice = register("alice")
    _log(client, alice["headers"], media_title="Dune", media_external_id="1")
    _log(
        client,
        alice["headers"],
        post_type="rate-review",
        media_title="Cats",
        media_external_id="9",
        rating=0,
        list_name=None,
    )

    groups = client.get("/feed/", headers=alice["headers"]).json()["groups"]

    kinds = {group["kind"]: group for group in groups}
    assert set(kinds) == {"list_adds", "ratings"}
    rating_group = kinds["ratings"]
    assert rating_group["slides"][0]["rating"] == 0
    assert rating_group["slides"][0]["title"] == "Rated 0 stars"
    assert rating_group["header_text"] == "rated Cats"


def test_feed_groups_same_media_across_users(client, register):
    alice = register("alice")
    bob = register("bob")
    _log(client, alice["headers"], media_title="Dune", media_external_id="1")
    _log(client, bob["headers"], media_title="Dune", media_external_id="1", list_name="Currently")

    payload = client.get("/feed/", headers=alice["headers"]).json()

    assert len(payload["groups"]) == 2
    assert {group["user"]["username"] for group in payload["groups"]} == {"alice", "bob"}
    media_groups = payload["media_groups"]
    assert len(media_groups) == 1
    assert media_groups[0]["media"]["title"] == "Dune"
    assert [user["username"] for user in media_groups[0]["users"]] == ["bob", "alice"]
    assert media_groups[0]["show_bet"] is True


def test_feed_can_be_limited_to_one_user(client, register):
    alice = register("alice")
    bob = register("bob")
    _log(client, alice["headers"], media_title="Dune", media_external_id="1")
    _log(client, bob["headers"], media_title="Heat", media_external_id="3")

    response = client.get(
        "/feed/", params={"user_id": bob["id"]}, headers=alice["headers"]
    )

    groups = response.json()["groups"]
    assert len(groups) == 1
    assert groups[0]["user"]["id"] == str(bob["id"])


def test_empty_feed(client, register):
    alice = register("alice")

    response = client.get("/feed/", headers=alice["headers"])

    assert response.status_code == 200
    assert response.json()["groups"] == []
    assert response.json()["media_groups"] == []
