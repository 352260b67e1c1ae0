"""Use case for registering users."""

import re

from sqlalchemy.orm import Session

from consumed.domain.entities import User
from consumed.infrastructure.repositories import UserRepository
from consumed.infrastructure.security import get_password_hash
from consumed.utils import now_in_app_timezone

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]{3,50}$")


def create_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    display_name: str | None = None,
    avatar: str | None = None,
) -> User:
    """Create a new user ensuring unique e-mail addresses and usernames."""

    repository = UserRepository(session)
    username = username.strip()

    if not _USERNAME_PATTERN.match(username):
        raise ValueError(
            "Username must be 3-50 characters of letters, digits, '.', '_' or '-'"
        )
    if repository.get_by_email(email):
        raise ValueError("Email is already registered")
    if repository.get_by_username(username):
        raise ValueError("Username is already taken")

    user = User(
        id=None,
        username=username,
        display_name=(display_name or "").strip() or username,
        email=email.strip().lower(),
        password=get_password_hash(password),
        avatar=avatar,
        is_active=True,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
