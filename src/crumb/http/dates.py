"""Locale-independent ``expires`` dates.

``time.strftime`` and ``datetime.strftime`` follow the host locale for
``%a`` and ``%b``; browsers only understand the English names, so the
tables are fixed here.
"""

from datetime import UTC, datetime

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def as_utc(value: datetime) -> datetime:
    """Return *value* in UTC. Naive datetimes are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_cookie_date(value: datetime) -> bytes:
    """Render *value* as ``Wed, 09 Jun 2021 10:18:14 GMT``.

    Sub-second precision is dropped.
    """
    t = as_utc(value)
    return (
        f"{_WEEKDAYS[t.weekday()]}, {t.day:02d} {_MONTHS[t.month - 1]} {t.year:04d} "
        f"{t.hour:02d}:{t.minute:02d}:{t.second:02d} GMT"
    ).encode("ascii")
