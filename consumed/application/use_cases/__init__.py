"""Aggregate application use cases."""

from .feed import consolidate, get_feed
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "consolidate",
    "create_user",
    "get_feed",
]
