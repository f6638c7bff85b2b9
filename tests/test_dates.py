"""Tests for crumb.http.dates — locale-independent expires dates."""

import locale
from datetime import UTC, datetime, timedelta, timezone

import pytest

from crumb.http.dates import as_utc, format_cookie_date


class TestFormatCookieDate:
    def test_known_date(self) -> None:
        value = datetime(2021, 6, 9, 10, 18, 14, tzinfo=UTC)
        assert format_cookie_date(value) == b"Wed, 09 Jun 2021 10:18:14 GMT"

    def test_epoch(self) -> None:
        value = datetime(1970, 1, 1, tzinfo=UTC)
        assert format_cookie_date(value) == b"Thu, 01 Jan 1970 00:00:00 GMT"

    def test_microseconds_dropped(self) -> None:
        value = datetime(2024, 2, 29, 23, 59, 59, 999_999, tzinfo=UTC)
        assert format_cookie_date(value) == b"Thu, 29 Feb 2024 23:59:59 GMT"

    def test_naive_is_utc(self) -> None:
        assert format_cookie_date(datetime(2030, 12, 1, 8, 5, 3)) == b"Sun, 01 Dec 2030 08:05:03 GMT"

    def test_aware_converted(self) -> None:
        value = datetime(2021, 6, 9, 0, 30, tzinfo=timezone(timedelta(hours=5)))
        assert format_cookie_date(value) == b"Tue, 08 Jun 2021 19:30:00 GMT"

    @pytest.mark.parametrize(
        ("month", "name"),
        [(1, b"Jan"), (4, b"Apr"), (7, b"Jul"), (9, b"Sep"), (12, b"Dec")],
    )
    def test_month_names(self, month: int, name: bytes) -> None:
        value = datetime(2021, month, 15, tzinfo=UTC)
        assert b" " + name + b" " in format_cookie_date(value)

    def test_ignores_host_locale(self) -> None:
        """Names come from fixed tables, not from the C library."""
        previous = locale.setlocale(locale.LC_TIME)
        try:
            try:
                locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
            except locale.Error:
                pytest.skip("de_DE.UTF-8 locale not available")
            value = datetime(2021, 3, 2, tzinfo=UTC)
            assert format_cookie_date(value) == b"Tue, 02 Mar 2021 00:00:00 GMT"
        finally:
            locale.setlocale(locale.LC_TIME, previous)


class TestAsUtc:
    def test_naive_gets_utc(self) -> None:
        assert as_utc(datetime(2021, 1, 1)).tzinfo is UTC

    def test_aware_converted(self) -> None:
        value = datetime(2021, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert as_utc(value) == datetime(2021, 1, 1, tzinfo=UTC)
