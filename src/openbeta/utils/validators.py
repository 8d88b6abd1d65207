"""Format checks for user supplied profile fields.

Only the shape of the value is validated; uniqueness and existence are the
caller's concern.
"""

from __future__ import annotations

import re

USERNAME_MAX_LENGTH = 30

_USERNAME = re.compile(r"[a-zA-Z0-9]+(?:[_.-][a-zA-Z0-9]+)*")
_USERNAME_RESERVED = re.compile(r"openbeta|0penbeta|admin", re.IGNORECASE)

_WEBSITE_URL = re.compile(
    r"(?:https?://)?(?:www\.)?(?!.*(?:https?|www\.))"
    r"[a-zA-Z0-9_-]+(?:\.[a-zA-Z]+)+"
    r"(?:/[\w\-%/@.~?=&+#]*)?"
)


def check_username(uid: str | None) -> bool:
    """Return ``True`` when ``uid`` is an acceptable username."""
    return (
        uid is not None
        and len(uid) <= USERNAME_MAX_LENGTH
        and _USERNAME_RESERVED.search(uid) is None
        and _USERNAME.fullmatch(uid) is not None
    )


def check_website_url(url: str) -> bool:
    """Loose website URL check; scheme and ``www.`` are optional."""
    return " " not in url and len(url) > 2 and _WEBSITE_URL.fullmatch(url) is not None


__all__ = ["USERNAME_MAX_LENGTH", "check_username", "check_website_url"]
