"""Aggregate reads over orders for the statistics endpoints."""

import logging
from collections.abc import Collection
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Literal, NoReturn

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.core.exceptions import StoreUnavailableError
from app.core.money import quantize_money
from app.core.repository import BaseRepository
from app.orders.models.order import Order, OrderStatus

logger = logging.getLogger(__name__)

GroupKey = Literal["status", "payment_status", "payment_method"]


@dataclass(frozen=True)
class OrderTotals:
    """Count and money sums over a set of orders."""

    order_count: int
    final_total: Decimal
    shipping_fee: Decimal
    discount_amount: Decimal


@dataclass(frozen=True)
class GroupTotals:
    """One row of a grouped aggregate, keyed by an enum member."""

    key: Enum
    order_count: int
    total_value: Decimal


class OrderStatisticsRepository(BaseRepository[Order]):
    """Store access for order statistics.

    Every method is a single aggregate query. Driver errors are logged and
    re-raised as :class:`StoreUnavailableError`; nothing here retries.
    """

    def __init__(self, db: Session):
        super().__init__(db, Order)

    def _in_window(
        self,
        query: Query,
        start: datetime,
        end: datetime,
        statuses: Collection[OrderStatus] | None,
    ) -> Query:
        query = query.filter(Order.created_at >= start, Order.created_at <= end)
        if statuses is not None:
            query = query.filter(Order.status.in_(list(statuses)))
        return query

    def totals(
        self,
        start: datetime,
        end: datetime,
        statuses: Collection[OrderStatus] | None = None,
    ) -> OrderTotals:
        """Count orders and sum their money columns within ``[start, end]``.

        Args:
            start: Window start (inclusive).
            end: Window end (inclusive).
            statuses: Restrict to these order statuses; None means all.

        Returns:
            OrderTotals, with zero sums when nothing matched.
        """
        query = self.db.query(
            func.count(Order.id),
            func.sum(Order.final_total),
            func.sum(Order.shipping_fee),
            func.sum(Order.discount_amount),
        )
        try:
            row = self._in_window(query, start, end, statuses).one()
        except SQLAlchemyError as exc:
            self._fail("totals", exc)

        count, final_total, shipping_fee, discount_amount = row
        return OrderTotals(
            order_count=count or 0,
            final_total=quantize_money(final_total),
            shipping_fee=quantize_money(shipping_fee),
            discount_amount=quantize_money(discount_amount),
        )

    def group_totals(
        self,
        start: datetime,
        end: datetime,
        group_by: GroupKey,
        statuses: Collection[OrderStatus] | None = None,
    ) -> list[GroupTotals]:
        """Count orders and sum ``final_total`` per value of ``group_by``.

        Only groups with at least one order are returned.
        """
        column = getattr(Order, group_by)
        query = self.db.query(column, func.count(Order.id), func.sum(Order.final_total))
        try:
            rows = self._in_window(query, start, end, statuses).group_by(column).all()
        except SQLAlchemyError as exc:
            self._fail(f"group_totals:{group_by}", exc)

        return [
            GroupTotals(key=key, order_count=count or 0, total_value=quantize_money(total))
            for key, count, total in rows
        ]

    def _fail(self, operation: str, exc: SQLAlchemyError) -> NoReturn:
        logger.error("Order statistics query failed: %s (%s)", operation, exc)
        self.db.rollback()
        raise StoreUnavailableError(operation=operation) from exc
