"""Human readable upload dates."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


def _as_aware(value: datetime | str) -> datetime:
    if isinstance(value, str):
        value = isoparse(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _round(value: float) -> int:
    # half up, so 1.5 months reads as 2 and 2.5 as 3
    return math.floor(value + 0.5)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_distance_strict(value: datetime | str, *, now: datetime) -> str:
    """Distance between ``value`` and ``now`` in its largest unit.

    Units switch at 60 seconds, 60 minutes, 24 hours, 30 days and 365 days;
    months are 30-day blocks and twelve of them read as one year. Past dates
    get an ``ago`` suffix, future ones an ``in`` prefix.
    """
    value = _as_aware(value)
    now = _as_aware(now)
    seconds = (now - value).total_seconds()
    future = seconds < 0
    elapsed = abs(seconds)

    if elapsed < _MINUTE:
        text = _plural(_round(elapsed), "second")
    elif elapsed < _HOUR:
        text = _plural(_round(elapsed / _MINUTE), "minute")
    elif elapsed < _DAY:
        text = _plural(_round(elapsed / _HOUR), "hour")
    elif elapsed < _MONTH:
        text = _plural(_round(elapsed / _DAY), "day")
    elif elapsed < _YEAR:
        months = _round(elapsed / _MONTH)
        text = _plural(1, "year") if months == 12 else _plural(months, "month")
    else:
        text = _plural(_round(elapsed / _YEAR), "year")

    return f"in {text}" if future else f"{text} ago"


def get_upload_date_summary(
    date_uploaded: datetime | str, now: datetime | None = None
) -> str:
    """``"Mar 2021"`` for uploads older than a year, else ``"9 days ago"``.

    ``date_uploaded`` may be an ISO 8601 string such as a Sirv ``ctime``.
    """
    date_uploaded = _as_aware(date_uploaded)
    now = _as_aware(now) if now is not None else datetime.now(timezone.utc)
    if relativedelta(now, date_uploaded).years >= 1:
        return date_uploaded.strftime("%b %Y")
    return format_distance_strict(date_uploaded, now=now)


__all__ = ["format_distance_strict", "get_upload_date_summary"]
