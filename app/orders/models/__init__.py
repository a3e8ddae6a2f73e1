from app.orders.models.order import (
    REVENUE_STATUSES,
    Order,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)

__all__ = [
    "Order",
    "OrderStatus",
    "PaymentStatus",
    "PaymentMethod",
    "REVENUE_STATUSES",
]
