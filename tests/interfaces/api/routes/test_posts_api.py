"""Integration tests for likes, comments, deletion and notifications."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


@pytest.fixture()
def post_by_alice(client, register):
    alice = register("alice", display_name="Alice")
    bob = register("bob", display_name="Bob")
    response = client.post(
        "/posts/",
        json={
            "post_type": "finished",
            "media_title": "The Bear",
            "media_type": "tv",
            "media_external_id": "136315",
            "media_external_source": "tmdb",
        },
        headers=alice["headers"],
    )
    assert response.status_code == 201
    return alice, bob, response.json()


def test_like_and_unlike(client, post_by_alice):
    alice, bob, post = post_by_alice
    like_url = f"/posts/{post['id']}/like"

    first = client.post(like_url, headers=bob["headers"])
    assert first.status_code == 200
    assert first.json() == {"post_id": post["id"], "likes": 1, "liked": True}

    duplicate = client.post(like_url, headers=bob["headers"])
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Already liked"

    notifications = client.get("/notifications/", headers=alice["headers"]).json()
    assert len(notifications) == 1
    assert notifications[0]["event_type"] == "like"
    assert notifications[0]["message"] == "Bob liked your post"

    removed = client.delete(like_url, headers=bob["headers"])
    assert removed.status_code == 200
    assert removed.json()["likes"] == 0

    again = client.delete(like_url, headers=bob["headers"])
    assert again.json()["likes"] == 0


def test_liking_own_post_sends_no_notification(client, post_by_alice):
    alice, _, post = post_by_alice

    assert client.post(f"/posts/{post['id']}/like", headers=alice["headers"]).status_code == 200

    assert client.get("/notifications/", headers=alice["headers"]).json() == []


def test_like_missing_post(client, post_by_alice):
    _, bob, _ = post_by_alice

    assert client.post("/posts/9999/like", headers=bob["headers"]).status_code == 404


def test_comment_thread(client, post_by_alice):
    alice, bob, post = post_by_alice
    comments_url = f"/posts/{post['id']}/comments"

    root = client.post(comments_url, json={"content": "So good"}, headers=bob["headers"])
    assert root.status_code == 201
    reply = client.post(
        comments_url,
        json={"content": "Right?", "parent_comment_id": root.json()["id"]},
        headers=alice["headers"],
    )
    assert reply.status_code == 201

    thread = client.get(comments_url, headers=alice["headers"]).json()
    assert len(thread) == 1
    assert thread[0]["username"] == "bob"
    assert [child["content"] for child in thread[0]["replies"]] == ["Right?"]

    alice_events = [n["event_type"] for n in client.get("/notifications/", headers=alice["headers"]).json()]
    bob_events = [n["event_type"] for n in client.get("/notifications/", headers=bob["headers"]).json()]
    assert alice_events == ["comment"]
    assert bob_events == ["comment_reply"]

    group = client.get("/feed/", headers=alice["headers"]).json()["groups"][0]
    assert group["comments"] == 2


def test_reply_to_comment_of_other_post_is_rejected(client, post_by_alice):
    alice, bob, post = post_by_alice
    other = client.post(
        "/posts/",
        json={"media_title": "Dune", "list_name": "Want To"},
        headers=bob["headers"],
    ).json()
    foreign = client.post(
        f"/posts/{other['id']}/comments", json={"content": "hi"}, headers=alice["headers"]
    ).json()

    response = client.post(
        f"/posts/{post['id']}/comments",
        json={"content": "nope", "parent_comment_id": foreign["id"]},
        headers=bob["headers"],
    )

    assert response.status_code == 400


def test_only_the_owner_can_delete(client, post_by_alice):
    alice, bob, post = post_by_alice
    client.post(f"/posts/{post['id']}/like", headers=bob["headers"])
    client.post(
        f"/posts/{post['id']}/comments", json={"content": "nice"}, headers=bob["headers"]
    )

    forbidden = client.delete(f"/posts/{post['id']}", headers=bob["headers"])
    assert forbidden.status_code == 403

    deleted = client.delete(f"/posts/{post['id']}", headers=alice["headers"])
    assert deleted.status_code == 204

    assert client.delete(f"/posts/{post['id']}", headers=alice["headers"]).status_code == 404
    assert client.get(f"/posts/{post['id']}/comments", headers=alice["headers"]).status_code == 404
    assert client.get("/feed/", headers=alice["headers"]).json()["groups"] == []


def test_mark_notifications_read(client, post_by_alice):
    alice, bob, post = post_by_alice
    client.post(f"/posts/{post['id']}/like", headers=bob["headers"])
    notification_id = client.get("/notifications/", headers=alice["headers"]).json()[0]["id"]

    response = client.post(
        "/notifications/read",
        json={"ids": [notification_id, notification_id]},
        headers=alice["headers"],
    )

    assert response.json() == {"updated": 1}
    unread = client.get(
        "/notifications/", params={"unread_only": True}, headers=alice["headers"]
    ).json()
    assert unread == []


def test_rating_out_of_range_is_rejected(client, post_by_alice):
    alice, _, _ = post_by_alice

    response = client.post(
        "/posts/",
        json={"post_type": "rate-review", "media_title": "Dune", "rating": 7},
        headers=alice["headers"],
    )

    assert response.status_code == 422
