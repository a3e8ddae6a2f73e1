"""Revenue and order statistics service."""

import logging
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import TypeVar

from app.core.money import ZERO, quantize_money
from app.orders.models.order import REVENUE_STATUSES, OrderStatus, PaymentMethod, PaymentStatus
from app.stats.repositories.order_statistics import GroupTotals, OrderStatisticsRepository
from app.stats.schemas.revenue import (
    OrderFinancialsResponse,
    OrdersByPaymentStatusResponse,
    OrdersByStatusResponse,
    OrderStatusBreakdown,
    PaymentMethodRevenue,
    PaymentStatusBreakdown,
    RevenueByPaymentMethodResponse,
    RevenueSummaryResponse,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def fill_breakdown(categories: type[E], rows: Iterable[GroupTotals]) -> list[GroupTotals]:
    """Return one row per member of ``categories``, in declaration order.

    Members missing from ``rows`` get a zero count and zero total. Rows whose
    key is not a member of ``categories`` are dropped.

    Args:
        categories: Enum whose members are the expected group keys.
        rows: Sparse grouped results from the store.

    Returns:
        Dense list with exactly ``len(categories)`` entries.
    """
    filled: dict[E, GroupTotals] = {
        member: GroupTotals(key=member, order_count=0, total_value=ZERO) for member in categories
    }
    for row in rows:
        try:
            member = categories(row.key)
        except ValueError:
            logger.warning("Dropping unknown %s group: %r", categories.__name__, row.key)
            continue
        filled[member] = GroupTotals(
            key=member, order_count=row.order_count, total_value=row.total_value
        )
    return list(filled.values())


class RevenueStatisticsService:
    """Five read-only aggregates over orders in a ``[start, end]`` window."""

    @staticmethod
    def get_revenue_summary(
        repository: OrderStatisticsRepository, start: datetime, end: datetime
    ) -> RevenueSummaryResponse:
        """Total revenue, order count and average order value.

        Only confirmed, shipped and delivered orders are counted.
        """
        logger.debug("Revenue summary for %s..%s", start.isoformat(), end.isoformat())
        totals = repository.totals(start, end, statuses=REVENUE_STATUSES)

        average = (
            quantize_money(totals.final_total / totals.order_count)
            if totals.order_count > 0
            else ZERO
        )

        return RevenueSummaryResponse(
            start_date=start,
            end_date=end,
            total_revenue=totals.final_total,
            total_orders=totals.order_count,
            average_order_value=average,
        )

    @staticmethod
    def get_revenue_by_payment_method(
        repository: OrderStatisticsRepository, start: datetime, end: datetime
    ) -> RevenueByPaymentMethodResponse:
        logger.debug("Revenue by payment method for %s..%s", start.isoformat(), end.isoformat())
        rows = repository.group_totals(
            start, end, group_by="payment_method", statuses=REVENUE_STATUSES
        )

        return RevenueByPaymentMethodResponse(
            start_date=start,
            end_date=end,
            data=[
                PaymentMethodRevenue(
                    payment_method=row.key,
                    total_revenue=row.total_value,
                    order_count=row.order_count,
                )
                for row in fill_breakdown(PaymentMethod, rows)
            ],
        )

    @staticmethod
    def get_orders_by_status(
        repository: OrderStatisticsRepository, start: datetime, end: datetime
    ) -> OrdersByStatusResponse:
        """Order count and value per status, including pending and canceled."""
        logger.debug("Orders by status for %s..%s", start.isoformat(), end.isoformat())
        rows = repository.group_totals(start, end, group_by="status")

        return OrdersByStatusResponse(
            start_date=start,
            end_date=end,
            data=[
                OrderStatusBreakdown(
                    status=row.key, order_count=row.order_count, total_value=row.total_value
                )
                for row in fill_breakdown(OrderStatus, rows)
            ],
        )

    @staticmethod
    def get_orders_by_payment_status(
        repository: OrderStatisticsRepository, start: datetime, end: datetime
    ) -> OrdersByPaymentStatusResponse:
        logger.debug("Orders by payment status for %s..%s", start.isoformat(), end.isoformat())
        rows = repository.group_totals(start, end, group_by="payment_status")

        return OrdersByPaymentStatusResponse(
            start_date=start,
            end_date=end,
            data=[
                PaymentStatusBreakdown(
                    payment_status=row.key,
                    order_count=row.order_count,
                    total_value=row.total_value,
                )
                for row in fill_breakdown(PaymentStatus, rows)
            ],
        )

    @staticmethod
    def get_order_financials(
        repository: OrderStatisticsRepository, start: datetime, end: datetime
    ) -> OrderFinancialsResponse:
        """Shipping fees and discounts on revenue-contributing orders."""
        logger.debug("Order financials for %s..%s", start.isoformat(), end.isoformat())
        totals = repository.totals(start, end, statuses=REVENUE_STATUSES)

        return OrderFinancialsResponse(
            start_date=start,
            end_date=end,
            total_shipping_fee=totals.shipping_fee,
            total_discount_amount=totals.discount_amount,
        )
