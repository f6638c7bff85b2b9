"""Crumb — ``Set-Cookie`` / ``Cookie`` header encoding and decoding.

Basic usage::

    from dataclasses import replace
    from datetime import UTC, datetime, timedelta

    from crumb import (
        DEFAULT_COOKIE_SETTINGS,
        ValidFor,
        generate_cookie_header_string,
        parse_cookies,
    )

    settings = replace(DEFAULT_COOKIE_SETTINGS, eol=ValidFor(timedelta(hours=1)), secure=True)
    header = generate_cookie_header_string("session", "abc", settings, datetime.now(UTC))

    parse_cookies(b"session=abc;theme=dark")
    # [("session", "abc"), ("theme", "dark")]
"""

from importlib import import_module

__version__ = "0.1.0.dev0"
__all__ = [
    "DEFAULT_COOKIE_SETTINGS",
    "SESSION",
    "ConfigurationError",
    "CookieEOL",
    "CookieSettings",
    "CrumbError",
    "ValidFor",
    "ValidForSession",
    "ValidUntil",
    "delete_cookie_header",
    "format_cookie_date",
    "generate_cookie_header_string",
    "lookup_cookie",
    "parse_cookies",
    "request_cookies",
    "set_cookie_header",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_COOKIE_SETTINGS": "crumb.http.cookies",
    "SESSION": "crumb.http.cookies",
    "CookieEOL": "crumb.http.cookies",
    "CookieSettings": "crumb.http.cookies",
    "ValidFor": "crumb.http.cookies",
    "ValidForSession": "crumb.http.cookies",
    "ValidUntil": "crumb.http.cookies",
    "generate_cookie_header_string": "crumb.http.cookies",
    "parse_cookies": "crumb.http.cookies",
    "delete_cookie_header": "crumb.http.headers",
    "lookup_cookie": "crumb.http.headers",
    "request_cookies": "crumb.http.headers",
    "set_cookie_header": "crumb.http.headers",
    "format_cookie_date": "crumb.http.dates",
    "ConfigurationError": "crumb.errors",
    "CrumbError": "crumb.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module = _LAZY_IMPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
