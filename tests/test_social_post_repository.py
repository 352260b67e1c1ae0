"""Tests for like bookkeeping in the social post repository."""

from __future__ import annotations

import pytest

from consumed.application.use_cases.posts import create_post
from consumed.application.use_cases.users import create_user
from consumed.infrastructure.database import SessionLocal
from consumed.infrastructure.repositories import SocialPostRepository


@pytest.fixture()
def session(database):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def test_duplicate_like_is_rejected_by_the_database(session):
    author = create_user(
        session, username="author", email="author@example.com", password="Sup3rSecret!"
    )
    fan = create_user(
        session, username="fan", email="fan@example.com", password="Sup3rSecret!"
    )
    post = create_post(session, author=author, post_type="finished", media_title="Heat")
    repository = SocialPostRepository(session)

    assert repository.add_like(post.id, fan.id) == 1

    # Skips the has_like check, as a concurrent request would.
    with pytest.raises(ValueError, match="Already liked"):
        repository.add_like(post.id, fan.id)

    assert repository.has_like(post.id, fan.id)
    assert repository.get(post.id).likes_count == 1
