"""Exact monetary amounts for schemas and aggregates.

Amounts are carried as ``Decimal`` everywhere in Python and only turned into
JSON numbers at the response boundary. The wire value is an IEEE double, so
amounts beyond roughly 15 significant digits lose precision in JSON; sums are
exact up to that point.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic.functional_serializers import PlainSerializer

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def quantize_money(value: Decimal | int | None) -> Decimal:
    """Round to cents, treating ``None`` (an empty SQL ``SUM``) as zero."""
    if value is None:
        return ZERO
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _serialize_money(v: Decimal) -> float:
    return float(v)


Money = Annotated[Decimal, PlainSerializer(_serialize_money, return_type=float, when_used="json")]
