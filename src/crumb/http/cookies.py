"""Cookie header generation and parsing.

Consolidates the write side (``generate_cookie_header_string``, the value
of a ``Set-Cookie`` header) and the read side (``parse_cookies``, the value
of a ``Cookie`` header) in one module. Both are pure: the current time is
passed in rather than read from the clock.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from fractions import Fraction
from typing import TypeAlias

from crumb.errors import ConfigurationError
from crumb.http.dates import as_utc, format_cookie_date
from crumb.http.encoding import url_decode, url_encode

logger = logging.getLogger("crumb.http")

_MICROSECOND = timedelta(microseconds=1)


# -- Expiration policy --


@dataclass(frozen=True, slots=True)
class ValidUntil:
    """The cookie is valid until an absolute point in time (UTC)."""

    until: datetime


@dataclass(frozen=True, slots=True)
class ValidFor:
    """The cookie is valid for a period counted from generation time."""

    duration: timedelta


@dataclass(frozen=True, slots=True)
class ValidForSession:
    """The cookie expires with the browser session. No expiry attributes."""


CookieEOL: TypeAlias = ValidUntil | ValidFor | ValidForSession

SESSION = ValidForSession()


# -- Settings --


@dataclass(frozen=True, slots=True)
class CookieSettings:
    """Attributes attached to a single ``Set-Cookie`` header.

    Immutable; derive variations with ``dataclasses.replace``::

        settings = replace(DEFAULT_COOKIE_SETTINGS, secure=True, http_only=True)
    """

    eol: CookieEOL = SESSION
    path: bytes | str = b"/"
    domain: bytes | str | None = None  # None means no domain attribute
    http_only: bool = False
    secure: bool = False


DEFAULT_COOKIE_SETTINGS = CookieSettings()


# -- Set-Cookie --


def generate_cookie_header_string(
    name: str,
    value: str,
    settings: CookieSettings,
    now: datetime,
) -> bytes:
    """Build the value of a ``Set-Cookie`` header.

    Segments are joined with ``"; "`` in a fixed order: name/value,
    ``domain``, ``path``, ``max-age``, ``expires``, ``HttpOnly``,
    ``Secure``. Optional segments are left out entirely.

    The name is emitted verbatim (UTF-8); the value is percent-encoded.
    Nothing is validated, so this never fails on odd input.

    Args:
        name: Cookie name.
        value: Cookie value, percent-encoded on output.
        settings: Attributes for the cookie.
        now: Reference instant for relative expiration math.

    Raises:
        ConfigurationError: If ``settings.eol`` is not an expiration policy.
    """
    segments = [_as_bytes(name) + b"=" + url_encode(value)]
    if settings.domain is not None:
        segments.append(b"domain=" + _as_bytes(settings.domain))
    segments.append(b"path=" + _as_bytes(settings.path))
    segments.extend(_expiry_segments(settings.eol, now))
    if settings.http_only:
        segments.append(b"HttpOnly")
    if settings.secure:
        segments.append(b"Secure")
    return b"; ".join(s for s in segments if s)


def _expiry_segments(eol: CookieEOL, now: datetime) -> list[bytes]:
    match eol:
        case ValidForSession():
            return []
        case ValidFor(duration=duration):
            expires = _shift(as_utc(now), duration)
        case ValidUntil(until=until):
            expires = as_utc(until)
            duration = expires - as_utc(now)
        case _:
            msg = f"Unknown cookie expiration policy: {eol!r}"
            raise ConfigurationError(msg)
    return [
        b"max-age=" + str(_max_age(duration)).encode("ascii"),
        b"expires=" + format_cookie_date(expires),
    ]


def _shift(start: datetime, duration: timedelta) -> datetime:
    """Add *duration* to *start*, saturating at the ends of the datetime range."""
    try:
        return start + duration
    except OverflowError:
        bound = datetime.max if duration > timedelta(0) else datetime.min
        return bound.replace(tzinfo=UTC)


def _max_age(duration: timedelta) -> int:
    """Whole seconds, negative clamped to 0, rounded half to even."""
    micros = max(duration, timedelta(0)) // _MICROSECOND
    return round(Fraction(micros, 1_000_000))


def _as_bytes(value: bytes | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "replace")
    return value


# -- Cookie --


def parse_cookies(header: bytes | str) -> list[tuple[str, str]]:
    """Split a ``Cookie`` header value into ``(name, value)`` pairs.

    Splits on every ``;`` and keeps input order. Whitespace around
    segments is *not* trimmed, so ``"a=1; b=2"`` yields the name ``" b"``
    for the second pair. A segment without ``=`` gives an empty value.

    Values are percent-decoded (``+`` as space). Malformed escapes and
    invalid UTF-8 are decoded best-effort; this never raises.
    """
    raw = _as_bytes(header)
    if not raw:
        return []
    return [_parse_pair(segment) for segment in raw.split(b";")]


def _parse_pair(segment: bytes) -> tuple[str, str]:
    name, _, encoded = segment.partition(b"=")
    return _decode_text(name), _decode_text(url_decode(encoded))


def _decode_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Cookie bytes %r are not valid UTF-8, decoding with replacement", raw)
        return raw.decode("utf-8", "replace")
