import re
from datetime import UTC, date, datetime, time
from typing import Annotated, Any

from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _serialize_utc_datetime(v: datetime | None) -> str | None:
    if v is None:
        return None
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    return v.isoformat()


UTCDatetime = Annotated[datetime, PlainSerializer(_serialize_utc_datetime)]


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded ``YYYY-MM-DD`` string; raises ValueError otherwise."""
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError("date must be in YYYY-MM-DD format")
    return date.fromisoformat(value)


def _validate_iso_date(v: Any) -> date:
    if isinstance(v, datetime):
        raise ValueError("date must be in YYYY-MM-DD format")
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        return parse_iso_date(v)
    raise ValueError("date must be in YYYY-MM-DD format")


# Timestamps and datetime strings that lax ``date`` parsing would accept are rejected.
ISODate = Annotated[date, BeforeValidator(_validate_iso_date)]


def start_of_day(d: date) -> datetime:
    """First instant of ``d`` in UTC."""
    return datetime.combine(d, time.min, tzinfo=UTC)


def end_of_day(d: date) -> datetime:
    """Last representable instant of ``d`` in UTC (23:59:59.999999)."""
    return datetime.combine(d, time.max, tzinfo=UTC)
