"""Human friendly names for feed authors."""

from __future__ import annotations

import re

_TRAILING_DIGITS = re.compile(r"\d+$")
_SEPARATORS = re.compile(r"[@_.\-]")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def format_username(username: str) -> str:
    """Turn a raw handle such as ``jane.doe42`` into ``Jane Doe``."""

    clean = username
    if "+" in clean:
        clean = clean.split("+")[-1] or clean
    clean = _TRAILING_DIGITS.sub("", clean)
    clean = _SEPARATORS.sub(" ", clean)
    clean = _CAMEL_BOUNDARY.sub(r"\1 \2", clean)
    words = [word[:1].upper() + word[1:].lower() for word in clean.split(" ") if word]
    return " ".join(words) or "User"


def get_display_name(display_name: str | None, username: str | None) -> str:
    if display_name and display_name.strip() and display_name != username:
        return display_name
    if username:
        return format_username(username)
    return "Unknown"


def get_avatar_initial(display_name: str | None, username: str | None) -> str:
    if display_name and display_name.strip() and display_name != username:
        return display_name[0].upper()
    if username:
        return format_username(username)[0].upper()
    return "?"


__all__ = ["format_username", "get_avatar_initial", "get_display_name"]
