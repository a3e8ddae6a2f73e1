"""Resolve a reporting period into a concrete UTC window."""

from datetime import UTC, date, datetime, timedelta
from typing import NamedTuple

from app.core.config import settings
from app.core.datetime_utils import end_of_day, parse_iso_date, start_of_day
from app.core.exceptions import InvalidRangeError
from app.stats.schemas.revenue import Period

_ROLLING_DAYS = {
    Period.WEEKLY: 7,
    Period.MONTHLY: 30,
    Period.YEARLY: 365,
}


class ReportWindow(NamedTuple):
    """Inclusive ``[start, end]`` window; queries use ``>= start`` and ``<= end``."""

    start: datetime
    end: datetime


def _parse_date(value: date | str | None, field: str) -> date:
    if value is None or value == "":
        raise InvalidRangeError(f"{field} is required when period is custom", field=field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(value)
    except ValueError:
        raise InvalidRangeError(
            f"{field} must be a date in YYYY-MM-DD format", field=field
        ) from None


def resolve_period(
    period: Period | str | None = None,
    start_date: date | str | None = None,
    end_date: date | str | None = None,
    *,
    now: datetime | None = None,
) -> ReportWindow:
    """Turn a period selector into a :class:`ReportWindow`.

    ``weekly``, ``monthly`` and ``yearly`` are rolling 7/30/365-day windows
    ending at ``now``; ``daily`` runs from midnight UTC to ``now``. ``custom``
    spans whole days, from the start of ``start_date`` to the last microsecond
    of ``end_date``. Explicit dates are ignored for every other period.

    Args:
        period: Period selector, or None for the default trailing window.
        start_date: First day of a custom window (``date`` or ``YYYY-MM-DD``).
        end_date: Last day of a custom window (``date`` or ``YYYY-MM-DD``).
        now: Reference time; defaults to the current UTC time.

    Raises:
        InvalidRangeError: Unknown period, or missing, malformed or reversed
            custom bounds.
    """
    now = (now or datetime.now(UTC)).astimezone(UTC)

    if period is None:
        return ReportWindow(now - timedelta(days=settings.DEFAULT_PERIOD_DAYS), now)

    try:
        period = Period(period)
    except ValueError:
        raise InvalidRangeError(f"Unknown period: {period}", field="period") from None

    if period == Period.DAILY:
        return ReportWindow(start_of_day(now.date()), now)

    if period in _ROLLING_DAYS:
        return ReportWindow(now - timedelta(days=_ROLLING_DAYS[period]), now)

    first_day = _parse_date(start_date, "startDate")
    last_day = _parse_date(end_date, "endDate")
    if first_day > last_day:
        raise InvalidRangeError("startDate must not be after endDate", field="startDate")

    return ReportWindow(start_of_day(first_day), end_of_day(last_day))
