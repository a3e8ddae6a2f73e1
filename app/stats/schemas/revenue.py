"""Revenue and order statistics schemas.

Field names are snake_case in Python and camelCase on the wire.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.datetime_utils import ISODate, UTCDatetime
from app.core.money import Money
from app.orders.models.order import OrderStatus, PaymentMethod, PaymentStatus


class Period(str, Enum):
    """Named reporting window."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PeriodQuery(CamelModel):
    """Validated ``period`` / ``startDate`` / ``endDate`` query parameters."""

    period: Period | None = Field(default=None, description="Defaults to the last 30 days")
    start_date: ISODate | None = Field(default=None, description="YYYY-MM-DD, required if custom")
    end_date: ISODate | None = Field(default=None, description="YYYY-MM-DD, required if custom")


# ============ Summaries ============


class RevenueSummaryResponse(CamelModel):
    """Revenue of confirmed, shipped and delivered orders in a window."""

    start_date: UTCDatetime
    end_date: UTCDatetime
    total_revenue: Money
    total_orders: int
    average_order_value: Money = Field(description="0 when there are no orders")


class OrderFinancialsResponse(CamelModel):
    """Shipping fees collected and discounts granted in a window."""

    start_date: UTCDatetime
    end_date: UTCDatetime
    total_shipping_fee: Money
    total_discount_amount: Money


# ============ Breakdowns ============


class PaymentMethodRevenue(CamelModel):
    payment_method: PaymentMethod
    total_revenue: Money
    order_count: int


class RevenueByPaymentMethodResponse(CamelModel):
    start_date: UTCDatetime
    end_date: UTCDatetime
    data: list[PaymentMethodRevenue] = Field(description="One entry per payment method")


class OrderStatusBreakdown(CamelModel):
    status: OrderStatus
    order_count: int
    total_value: Money


class OrdersByStatusResponse(CamelModel):
    start_date: UTCDatetime
    end_date: UTCDatetime
    data: list[OrderStatusBreakdown] = Field(description="One entry per order status")


class PaymentStatusBreakdown(CamelModel):
    payment_status: PaymentStatus
    order_count: int
    total_value: Money


class OrdersByPaymentStatusResponse(CamelModel):
    start_date: UTCDatetime
    end_date: UTCDatetime
    data: list[PaymentStatusBreakdown] = Field(description="One entry per payment status")
