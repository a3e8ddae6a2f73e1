"""Unit tests for resolve_period."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from app.core.exceptions import InvalidRangeError
from app.stats.schemas.revenue import Period
from app.stats.services.period import ReportWindow, resolve_period

NOW = datetime(2026, 10, 17, 15, 30, 45, tzinfo=UTC)


class TestNamedPeriods:
    def test_default_is_trailing_30_days(self):
        window = resolve_period(now=NOW)
        assert window == ReportWindow(NOW - timedelta(days=30), NOW)

    def test_daily_starts_at_midnight_utc(self):
        window = resolve_period(Period.DAILY, now=NOW)
        assert window.start == datetime(2026, 10, 17, tzinfo=UTC)
        assert window.end == NOW

    @pytest.mark.parametrize(
        "period, days",
        [(Period.WEEKLY, 7), (Period.MONTHLY, 30), (Period.YEARLY, 365)],
    )
    def test_rolling_windows(self, period, days):
        window = resolve_period(period, now=NOW)
        assert window.start == NOW - timedelta(days=days)
        assert window.end == NOW

    def test_accepts_plain_string(self):
        assert resolve_period("weekly", now=NOW) == resolve_period(Period.WEEKLY, now=NOW)

    def test_explicit_dates_ignored_for_named_period(self):
        window = resolve_period(Period.WEEKLY, "2020-01-01", "2020-01-31", now=NOW)
        assert window.start == NOW - timedelta(days=7)

    def test_now_in_other_timezone_is_normalised(self):
        local = NOW.astimezone(timezone(timedelta(hours=7)))
        window = resolve_period(Period.DAILY, now=local)
        assert window.start == datetime(2026, 10, 17, tzinfo=UTC)
        assert window.end.tzinfo == UTC

    def test_unknown_period_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_period("hourly", now=NOW)
        assert exc_info.value.details == {"field": "period"}

    @pytest.mark.parametrize("period", [None, *[p for p in Period if p != Period.CUSTOM]])
    def test_start_never_after_end(self, period):
        window = resolve_period(period, now=NOW)
        assert window.start <= window.end


class TestCustomPeriod:
    def test_spans_whole_days(self):
        window = resolve_period(Period.CUSTOM, "2026-09-01", "2026-09-30", now=NOW)
        assert window.start == datetime(2026, 9, 1, tzinfo=UTC)
        assert window.end == datetime(2026, 9, 30, 23, 59, 59, 999999, tzinfo=UTC)

    def test_accepts_date_objects(self):
        window = resolve_period(Period.CUSTOM, date(2026, 9, 1), date(2026, 9, 2), now=NOW)
        assert window.start == datetime(2026, 9, 1, tzinfo=UTC)
        assert window.end.date() == date(2026, 9, 2)

    def test_single_day_is_valid(self):
        window = resolve_period(Period.CUSTOM, "2026-09-15", "2026-09-15", now=NOW)
        assert window.start < window.end
        assert window.start.date() == window.end.date() == date(2026, 9, 15)

    def test_start_after_end_rejected(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_period(Period.CUSTOM, "2026-09-30", "2026-09-01", now=NOW)
        assert exc_info.value.error_code == "INVALID_RANGE"
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize(
        "start, end, field",
        [
            (None, "2026-09-30", "startDate"),
            ("2026-09-01", None, "endDate"),
            ("", "2026-09-30", "startDate"),
            (None, None, "startDate"),
        ],
    )
    def test_missing_bound_rejected(self, start, end, field):
        with pytest.raises(InvalidRangeError) as exc_info:
            resolve_period(Period.CUSTOM, start, end, now=NOW)
        assert exc_info.value.details == {"field": field}

    @pytest.mark.parametrize(
        "bad", ["2026-13-01", "17/10/2026", "20261017", "yesterday", "2026-1-5", "2026-10-01T00:00"]
    )
    def test_unparseable_bound_rejected(self, bad):
        with pytest.raises(InvalidRangeError):
            resolve_period(Period.CUSTOM, bad, "2026-12-31", now=NOW)
