"""Revenue and order statistics routes for the back-office dashboard."""

from fastapi import APIRouter, Depends

from app.auth.dependencies import require_staff_or_admin
from app.core.schemas import ERROR_RESPONSES
from app.stats.dependencies import get_order_statistics_repository, get_report_window
from app.stats.repositories.order_statistics import OrderStatisticsRepository
from app.stats.schemas.revenue import (
    OrderFinancialsResponse,
    OrdersByPaymentStatusResponse,
    OrdersByStatusResponse,
    RevenueByPaymentMethodResponse,
    RevenueSummaryResponse,
)
from app.stats.services.period import ReportWindow
from app.stats.services.revenue_service import RevenueStatisticsService

router = APIRouter(
    prefix="/stats/revenue",
    dependencies=[Depends(require_staff_or_admin)],
    responses=ERROR_RESPONSES,
)


@router.get("/summary", response_model=RevenueSummaryResponse)
def get_revenue_summary(
    window: ReportWindow = Depends(get_report_window),
    repository: OrderStatisticsRepository = Depends(get_order_statistics_repository),
) -> RevenueSummaryResponse:
    """
    Get revenue and order summary.

    Counts confirmed, shipped and delivered orders only. Returns:
    - Total revenue
    - Number of orders
    - Average order value (0 when there are no orders)
    """
    return RevenueStatisticsService.get_revenue_summary(repository, window.start, window.end)


@router.get("/by-payment-method", response_model=RevenueByPaymentMethodResponse)
def get_revenue_by_payment_method(
    window: ReportWindow = Depends(get_report_window),
    repository: OrderStatisticsRepository = Depends(get_order_statistics_repository),
) -> RevenueByPaymentMethodResponse:
    """
    Get revenue breakdown by payment method.

    Every payment method is listed, with zeros when it had no orders.
    """
    return RevenueStatisticsService.get_revenue_by_payment_method(
        repository, window.start, window.end
    )


@router.get("/orders/by-status", response_model=OrdersByStatusResponse)
def get_orders_by_status(
    window: ReportWindow = Depends(get_report_window),
    repository: OrderStatisticsRepository = Depends(get_order_statistics_repository),
) -> OrdersByStatusResponse:
    """
    Get order count and value breakdown by order status.

    Includes pending and canceled orders; every status is listed.
    """
    return RevenueStatisticsService.get_orders_by_status(repository, window.start, window.end)


@router.get("/orders/by-payment-status", response_model=OrdersByPaymentStatusResponse)
def get_orders_by_payment_status(
    window: ReportWindow = Depends(get_report_window),
    repository: OrderStatisticsRepository = Depends(get_order_statistics_repository),
) -> OrdersByPaymentStatusResponse:
    """Get order count and value breakdown by payment status."""
    return RevenueStatisticsService.get_orders_by_payment_status(
        repository, window.start, window.end
    )


@router.get("/orders/financials", response_model=OrderFinancialsResponse)
def get_order_financials(
    window: ReportWindow = Depends(get_report_window),
    repository: OrderStatisticsRepository = Depends(get_order_statistics_repository),
) -> OrderFinancialsResponse:
    """Get total shipping fees and discounts for revenue-contributing orders."""
    return RevenueStatisticsService.get_order_financials(repository, window.start, window.end)
