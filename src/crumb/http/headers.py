"""Raw ASGI header helpers for cookies.

Builds ``(name, value)`` byte pairs for responses and reads the
``cookie`` header out of a request's raw header list. Header names are
taken as ASGI delivers them: already lower-case.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import UTC, datetime

from crumb.http.cookies import (
    DEFAULT_COOKIE_SETTINGS,
    CookieSettings,
    ValidUntil,
    generate_cookie_header_string,
    parse_cookies,
)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def set_cookie_header(
    name: str,
    value: str,
    settings: CookieSettings = DEFAULT_COOKIE_SETTINGS,
    *,
    now: datetime,
) -> tuple[bytes, bytes]:
    """Return a ``set-cookie`` header pair for a response."""
    return b"set-cookie", generate_cookie_header_string(name, value, settings, now)


def delete_cookie_header(
    name: str,
    settings: CookieSettings = DEFAULT_COOKIE_SETTINGS,
    *,
    now: datetime,
) -> tuple[bytes, bytes]:
    """Return a ``set-cookie`` header pair that makes the client drop *name*.

    Path, domain and flags from *settings* are kept so the deletion
    matches the cookie that was originally set. The value is emptied and
    the expiry moved to the Unix epoch (``max-age=0``).
    """
    expired = replace(settings, eol=ValidUntil(EPOCH))
    return set_cookie_header(name, "", expired, now=now)


def request_cookies(raw_headers: Iterable[tuple[bytes, bytes]]) -> list[tuple[str, str]]:
    """Parse the first ``cookie`` header in *raw_headers*.

    Returns an empty list when the request carries no cookies.
    """
    for name, value in raw_headers:
        if name == b"cookie":
            return parse_cookies(value)
    return []


def lookup_cookie(cookies: Sequence[tuple[str, str]], name: str) -> str | None:
    """Return the value of the first cookie called *name*, or ``None``."""
    for key, value in cookies:
        if key == name:
            return value
    return None
